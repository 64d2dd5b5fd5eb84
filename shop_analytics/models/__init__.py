"""
Models package
"""
from shop_analytics.models.customer import Customer
from shop_analytics.models.product import Product
from shop_analytics.models.order import Order, OrderItem
from shop_analytics.models.employee import Employee

__all__ = ["Customer", "Product", "Order", "OrderItem", "Employee"]
