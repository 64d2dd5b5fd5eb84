"""
Customer API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from shop_analytics.database import get_db
from shop_analytics.exceptions import ReferentialIntegrityError
from shop_analytics.services.customer_service import CustomerService
from shop_analytics.services.order_service import OrderService
from shop_analytics.schemas.customer import CustomerCreate, CustomerResponse
from shop_analytics.schemas.order import OrderResponse

router = APIRouter(prefix="/customers", tags=["customers"])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Dependency to get CustomerService instance"""
    return CustomerService(db)


@router.get("", response_model=List[CustomerResponse], summary="Get all customers")
def get_customers(
    skip: int = Query(0, ge=0, description="Number of customers to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of customers to return"),
    service: CustomerService = Depends(get_customer_service)
):
    return service.get_all_customers(skip=skip, limit=limit)


@router.get("/{customer_id}", response_model=CustomerResponse, summary="Get customer by ID")
def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service)
):
    customer = service.get_customer_by_id(customer_id)
    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Customer with id={customer_id} not found"
        )
    return customer


@router.get("/{customer_id}/orders", response_model=List[OrderResponse], summary="Get orders by customer")
def get_customer_orders(
    customer_id: int,
    db: Session = Depends(get_db)
):
    return OrderService(db).get_orders_by_customer(customer_id)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED, summary="Create customer")
def create_customer(
    customer_data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service)
):
    """
    Register a new customer
    
    - **name**: Customer name (required)
    - **contact**: Email or phone (optional)
    - **join_date**: Signup date, not in the future (default: today)
    """
    try:
        return service.create_customer(customer_data)
    except ReferentialIntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete customer")
def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service)
):
    """
    Delete a customer. Rejected with 409 while the customer has orders.
    """
    try:
        success = service.delete_customer(customer_id)
    except ReferentialIntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Customer with id={customer_id} not found"
        )
    return None
