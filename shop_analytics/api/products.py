"""
Product API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from shop_analytics.database import get_db
from shop_analytics.exceptions import ReferentialIntegrityError, InsufficientStockError
from shop_analytics.services.product_service import ProductService
from shop_analytics.schemas.product import ProductCreate, StockUpdate, ProductResponse

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(db)


@router.get("", response_model=List[ProductResponse], summary="Get all products")
def get_products(
    skip: int = Query(0, ge=0, description="Number of products to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of products to return"),
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve all products with pagination
    
    - **skip**: Number of products to skip (default: 0)
    - **limit**: Maximum number of products to return (default: 100, max: 1000)
    """
    return service.get_all_products(skip=skip, limit=limit)


@router.get("/{product_id}", response_model=ProductResponse, summary="Get product by ID")
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    product = service.get_product_by_id(product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id={product_id} not found"
        )
    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED, summary="Create product")
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product
    
    - **name**: Product name (required)
    - **category**: Product category (required)
    - **price**: Unit price (required, non-negative)
    - **stock_quantity**: Stock quantity (default: 0, non-negative)
    """
    try:
        return service.create_product(product_data)
    except ReferentialIntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.patch("/{product_id}/stock", response_model=ProductResponse, summary="Update product stock")
def update_stock(
    product_id: int,
    stock_data: StockUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update product stock by adding or subtracting quantity
    
    - **product_id**: Product ID
    - **quantity**: Quantity to add (positive) or subtract (negative)
    
    Example: {"quantity": -5} will subtract 5 from current stock
    """
    try:
        product = service.update_stock(product_id, stock_data.quantity)
    except InsufficientStockError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id={product_id} not found"
        )
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete product")
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    try:
        success = service.delete_product(product_id)
    except ReferentialIntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id={product_id} not found"
        )
    return None
