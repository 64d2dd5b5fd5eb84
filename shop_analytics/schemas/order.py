"""
Pydantic schemas for Order request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import date
from decimal import Decimal


class OrderItemCreate(BaseModel):
    """Line item of an order being placed"""
    product_id: int = Field(..., gt=0, description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity to order")
    item_price: Optional[Decimal] = Field(
        None, ge=0, max_digits=10, decimal_places=2,
        description="Unit price charged; defaults to the product's current price"
    )


class OrderCreate(BaseModel):
    """Schema for placing a new order"""
    customer_id: int = Field(..., gt=0, description="Customer ID")
    order_date: date = Field(default_factory=date.today, description="Checkout date")
    items: List[OrderItemCreate] = Field(..., min_length=1)


class OrderItemResponse(BaseModel):
    """Schema for order item response"""
    id: int
    order_id: int
    product_id: int
    quantity: int
    item_price: Decimal
    
    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """Schema for order response"""
    id: int
    order_date: date
    customer_id: int
    total_amount: Decimal
    items: List[OrderItemResponse] = []
    
    model_config = ConfigDict(from_attributes=True)
