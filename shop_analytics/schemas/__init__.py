"""
Schemas package
"""
from shop_analytics.schemas.customer import CustomerBase, CustomerCreate, CustomerResponse
from shop_analytics.schemas.product import ProductBase, ProductCreate, StockUpdate, ProductResponse
from shop_analytics.schemas.order import OrderItemCreate, OrderCreate, OrderItemResponse, OrderResponse
from shop_analytics.schemas.employee import EmployeeBase, EmployeeCreate, EmployeeResponse
from shop_analytics.schemas.analytics import (
    OrderCountResponse,
    TotalRevenueResponse,
    ProductRevenueResponse,
    DepartmentSalaryResponse
)

__all__ = [
    "CustomerBase",
    "CustomerCreate",
    "CustomerResponse",
    "ProductBase",
    "ProductCreate",
    "StockUpdate",
    "ProductResponse",
    "OrderItemCreate",
    "OrderCreate",
    "OrderItemResponse",
    "OrderResponse",
    "EmployeeBase",
    "EmployeeCreate",
    "EmployeeResponse",
    "OrderCountResponse",
    "TotalRevenueResponse",
    "ProductRevenueResponse",
    "DepartmentSalaryResponse"
]
