"""
Pydantic schemas for Product request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal


class ProductBase(BaseModel):
    """Base Product schema with common fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    category: str = Field(..., min_length=1, max_length=100, description="Product category")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price (non-negative)")
    stock_quantity: int = Field(0, ge=0, description="Stock quantity (must be non-negative)")


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    pass


class StockUpdate(BaseModel):
    """Schema for updating product stock"""
    quantity: int = Field(..., description="Quantity to add (restock) or subtract (sale)")


class ProductResponse(ProductBase):
    """Schema for product response"""
    id: int
    
    model_config = ConfigDict(from_attributes=True)
