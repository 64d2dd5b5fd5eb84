"""
Analytics API endpoints - the analytical query catalog
"""
from fastapi import APIRouter, Depends, Query, Path
from sqlalchemy.orm import Session
from typing import List, Optional

from shop_analytics.database import get_db
from shop_analytics.services.analytics_service import AnalyticsService
from shop_analytics.schemas.customer import CustomerResponse
from shop_analytics.schemas.product import ProductResponse
from shop_analytics.schemas.analytics import (
    OrderCountResponse,
    TotalRevenueResponse,
    ProductRevenueResponse,
    DepartmentSalaryResponse
)

router = APIRouter(prefix="/analytics", tags=["analytics"])


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    """Dependency to get AnalyticsService instance"""
    return AnalyticsService(db)


@router.get(
    "/customers/joined/{year}",
    response_model=List[CustomerResponse],
    summary="Customers who joined in a year"
)
def customers_by_join_year(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    service: AnalyticsService = Depends(get_analytics_service)
):
    """
    Customers whose join date falls within the given calendar year
    
    - **year**: Calendar year, e.g. 2023
    """
    return service.customers_by_join_year(year)


@router.get(
    "/products/category/{category}",
    response_model=List[ProductResponse],
    summary="Products in a category"
)
def products_by_category(
    category: str,
    service: AnalyticsService = Depends(get_analytics_service)
):
    """
    Products whose category matches exactly
    
    - **category**: Category name, case sensitive
    """
    return service.products_by_category(category)


@router.get("/orders/count", response_model=OrderCountResponse, summary="Number of orders")
def order_count(service: AnalyticsService = Depends(get_analytics_service)):
    return service.order_count()


@router.get(
    "/products/max-price",
    response_model=List[ProductResponse],
    summary="Most expensive products"
)
def max_price_products(service: AnalyticsService = Depends(get_analytics_service)):
    """
    Products priced at the maximum price. Every tied product is returned.
    """
    return service.max_price_products()


@router.get("/revenue/total", response_model=TotalRevenueResponse, summary="Total revenue")
def total_revenue(service: AnalyticsService = Depends(get_analytics_service)):
    """
    Sum of quantity × item price over all order items (0 when there are none)
    """
    return service.total_revenue()


@router.get(
    "/products/top-revenue",
    response_model=List[ProductRevenueResponse],
    summary="Top products by revenue"
)
def top_products_by_revenue(
    n: Optional[int] = Query(None, ge=1, le=1000, description="Number of products to return"),
    service: AnalyticsService = Depends(get_analytics_service)
):
    """
    Products ranked by revenue, highest first. Ties go to the lower product ID.
    
    - **n**: Number of products to return (default: 3)
    """
    return service.top_products_by_revenue(n)


@router.get(
    "/customers/without-orders",
    response_model=List[CustomerResponse],
    summary="Customers without orders"
)
def customers_without_orders(service: AnalyticsService = Depends(get_analytics_service)):
    return service.customers_without_orders()


@router.get(
    "/employees/average-salary",
    response_model=List[DepartmentSalaryResponse],
    summary="Average salary by department"
)
def average_salary_by_department(service: AnalyticsService = Depends(get_analytics_service)):
    return service.average_salary_by_department()
