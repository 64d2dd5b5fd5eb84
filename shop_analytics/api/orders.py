"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from shop_analytics.database import get_db
from shop_analytics.exceptions import ReferentialIntegrityError, InsufficientStockError
from shop_analytics.services.order_service import OrderService
from shop_analytics.schemas.order import OrderCreate, OrderResponse

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.get("", response_model=List[OrderResponse], summary="Get all orders")
def get_orders(
    skip: int = Query(0, ge=0, description="Number of orders to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of orders to return"),
    service: OrderService = Depends(get_order_service)
):
    return service.get_all_orders(skip=skip, limit=limit)


@router.get("/{order_id}", response_model=OrderResponse, summary="Get order by ID")
def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    order = service.get_order_by_id(order_id)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order with id={order_id} not found"
        )
    return order


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED, summary="Place order")
def place_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """
    Place a new order
    
    Process:
    1. Validate customer and products exist
    2. Check stock availability
    3. Price items and compute the order total
    4. Save order, items and stock changes in one transaction
    
    - **customer_id**: Customer ID (required)
    - **order_date**: Checkout date (default: today)
    - **items**: product_id, quantity and optional item_price per line
    """
    try:
        return service.place_order(order_data)
    except (ReferentialIntegrityError, InsufficientStockError) as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete order")
def delete_order(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Delete an order together with its items
    """
    if not service.delete_order(order_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order with id={order_id} not found"
        )
    return None
