"""
Repositories package
"""
from shop_analytics.repositories.customer_repository import CustomerRepository
from shop_analytics.repositories.product_repository import ProductRepository
from shop_analytics.repositories.order_repository import OrderRepository
from shop_analytics.repositories.employee_repository import EmployeeRepository
from shop_analytics.repositories.analytics_repository import AnalyticsRepository

__all__ = [
    "CustomerRepository",
    "ProductRepository",
    "OrderRepository",
    "EmployeeRepository",
    "AnalyticsRepository"
]
