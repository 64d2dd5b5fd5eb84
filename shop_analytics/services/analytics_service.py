"""
Analytics Service - executes catalog queries and maps rows to typed results
"""
from typing import List
from sqlalchemy.orm import Session

from shop_analytics.config import settings
from shop_analytics.database import data_source_guard
from shop_analytics.logger import get_logger
from shop_analytics.repositories.analytics_repository import AnalyticsRepository
from shop_analytics.schemas.customer import CustomerResponse
from shop_analytics.schemas.product import ProductResponse
from shop_analytics.schemas.analytics import (
    OrderCountResponse,
    TotalRevenueResponse,
    ProductRevenueResponse,
    DepartmentSalaryResponse
)

log = get_logger(__name__)


class AnalyticsService:
    """
    Read-only executor for the analytical query catalog
    
    Connectivity and timeout failures surface as DataSourceUnavailableError;
    nothing is retried.
    """
    
    def __init__(self, db: Session):
        self.repository = AnalyticsRepository(db)
    
    def customers_by_join_year(self, year: int) -> List[CustomerResponse]:
        """Customers who joined during the given year"""
        log.debug("Running customers_by_join_year(year=%s)", year)
        with data_source_guard("customers_by_join_year"):
            customers = self.repository.customers_by_join_year(year)
        return [CustomerResponse.model_validate(c) for c in customers]
    
    def products_by_category(self, category: str) -> List[ProductResponse]:
        """Products in the given category"""
        log.debug("Running products_by_category(category=%r)", category)
        with data_source_guard("products_by_category"):
            products = self.repository.products_by_category(category)
        return [ProductResponse.model_validate(p) for p in products]
    
    def order_count(self) -> OrderCountResponse:
        log.debug("Running order_count()")
        with data_source_guard("order_count"):
            count = self.repository.order_count()
        return OrderCountResponse(count=count or 0)
    
    def max_price_products(self) -> List[ProductResponse]:
        """Most expensive products, every tied product included"""
        log.debug("Running max_price_products()")
        with data_source_guard("max_price_products"):
            products = self.repository.max_price_products()
        return [ProductResponse.model_validate(p) for p in products]
    
    def total_revenue(self) -> TotalRevenueResponse:
        log.debug("Running total_revenue()")
        with data_source_guard("total_revenue"):
            total = self.repository.total_revenue()
        return TotalRevenueResponse(total_revenue=total or 0)
    
    def top_products_by_revenue(self, n: int = None) -> List[ProductRevenueResponse]:
        """
        Top n products by revenue
        
        Args:
            n: Number of products to return (defaults to settings.DEFAULT_TOP_N)
        
        Raises:
            ValueError: If n is less than 1
        """
        if n is None:
            n = settings.DEFAULT_TOP_N
        if n < 1:
            raise ValueError(f"n must be at least 1, got {n}")
        
        log.debug("Running top_products_by_revenue(n=%s)", n)
        with data_source_guard("top_products_by_revenue"):
            rows = self.repository.top_products_by_revenue(n)
        return [
            ProductRevenueResponse(
                product_id=row.product_id,
                product_name=row.product_name,
                revenue=row.revenue
            )
            for row in rows
        ]
    
    def customers_without_orders(self) -> List[CustomerResponse]:
        """Customers that have not placed any order"""
        log.debug("Running customers_without_orders()")
        with data_source_guard("customers_without_orders"):
            customers = self.repository.customers_without_orders()
        return [CustomerResponse.model_validate(c) for c in customers]
    
    def average_salary_by_department(self) -> List[DepartmentSalaryResponse]:
        log.debug("Running average_salary_by_department()")
        with data_source_guard("average_salary_by_department"):
            rows = self.repository.average_salary_by_department()
        return [
            DepartmentSalaryResponse(
                department=row.department,
                average_salary=row.average_salary
            )
            for row in rows
        ]
