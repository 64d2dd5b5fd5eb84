"""
Services package
"""
from shop_analytics.services.analytics_service import AnalyticsService
from shop_analytics.services.customer_service import CustomerService
from shop_analytics.services.product_service import ProductService
from shop_analytics.services.order_service import OrderService
from shop_analytics.services.employee_service import EmployeeService

__all__ = ["AnalyticsService", "CustomerService", "ProductService", "OrderService", "EmployeeService"]
