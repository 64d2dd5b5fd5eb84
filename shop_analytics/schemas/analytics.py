"""
Typed result rows for the analytical query catalog
"""
from pydantic import BaseModel
from decimal import Decimal


class OrderCountResponse(BaseModel):
    """Scalar count of all orders"""
    count: int


class TotalRevenueResponse(BaseModel):
    """Sum of quantity * item_price over every order item"""
    total_revenue: Decimal


class ProductRevenueResponse(BaseModel):
    """Revenue earned by a single product"""
    product_id: int
    product_name: str
    revenue: Decimal


class DepartmentSalaryResponse(BaseModel):
    """Mean salary of a department"""
    department: str
    average_salary: Decimal
