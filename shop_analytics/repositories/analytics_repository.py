"""
Analytics Repository - the catalog of read-only analytical queries

Every method is a pure read over the current data state. Aggregates return
their identity value on empty tables and filters return an empty list.
"""
from datetime import date, MAXYEAR
from decimal import Decimal
from typing import List

from sqlalchemy import func, exists, cast, Numeric

from shop_analytics.models.customer import Customer
from shop_analytics.models.product import Product
from shop_analytics.models.order import Order, OrderItem
from shop_analytics.models.employee import Employee
from shop_analytics.repositories.base import BaseRepository


class AnalyticsRepository(BaseRepository):
    """Query catalog over the shop schema"""
    
    def customers_by_join_year(self, year: int) -> List[Customer]:
        """Customers whose join date falls within the given calendar year"""
        query = self.db.query(Customer).filter(Customer.join_date >= date(year, 1, 1))
        if year < MAXYEAR:
            query = query.filter(Customer.join_date < date(year + 1, 1, 1))
        return query.order_by(Customer.id).all()
    
    def products_by_category(self, category: str) -> List[Product]:
        """Products in exactly the given category"""
        return self.db.query(Product).filter(
            Product.category == category
        ).order_by(Product.id).all()
    
    def order_count(self) -> int:
        """Number of orders"""
        return self.db.query(func.count(Order.id)).scalar()
    
    def max_price_products(self) -> List[Product]:
        """All products priced at the maximum price (ties included)"""
        max_price = self.db.query(func.max(Product.price)).scalar_subquery()
        return self.db.query(Product).filter(
            Product.price == max_price
        ).order_by(Product.id).all()
    
    def total_revenue(self) -> Decimal:
        """Sum of quantity * item_price over every order item"""
        revenue = func.sum(OrderItem.quantity * OrderItem.item_price)
        return self.db.query(func.coalesce(revenue, 0)).scalar()
    
    def top_products_by_revenue(self, n: int = 3) -> list:
        """
        Products ranked by revenue
        
        Ties on revenue are broken by product ID ascending.
        
        Returns:
            Rows of (product_id, product_name, revenue), at most n
        """
        revenue = func.sum(OrderItem.quantity * OrderItem.item_price).label("revenue")
        return self.db.query(
            Product.id.label("product_id"),
            Product.name.label("product_name"),
            revenue
        ).join(
            OrderItem, OrderItem.product_id == Product.id
        ).group_by(
            Product.id, Product.name
        ).order_by(
            revenue.desc(), Product.id
        ).limit(n).all()
    
    def customers_without_orders(self) -> List[Customer]:
        """Customers that have never placed an order"""
        has_orders = exists().where(Order.customer_id == Customer.id)
        return self.db.query(Customer).filter(~has_orders).order_by(Customer.id).all()
    
    def average_salary_by_department(self) -> list:
        """
        Returns:
            Rows of (department, average_salary), ordered by department
        """
        average_salary = cast(func.avg(Employee.salary), Numeric(10, 2)).label("average_salary")
        return self.db.query(
            Employee.department,
            average_salary
        ).group_by(
            Employee.department
        ).order_by(
            Employee.department
        ).all()
