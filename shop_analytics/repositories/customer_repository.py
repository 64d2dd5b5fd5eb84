"""
Customer Repository - Data Access Layer
"""
from typing import List, Optional

from shop_analytics.models.customer import Customer
from shop_analytics.models.order import Order
from shop_analytics.repositories.base import BaseRepository
from shop_analytics.schemas.customer import CustomerCreate


class CustomerRepository(BaseRepository):
    """Repository for Customer rows"""
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Customer]:
        """Get all customers with pagination"""
        return self.db.query(Customer).order_by(Customer.id).offset(skip).limit(limit).all()
    
    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID"""
        return self.db.query(Customer).filter(Customer.id == customer_id).first()
    
    def create(self, customer_data: CustomerCreate) -> Customer:
        """Create new customer"""
        customer = Customer(**customer_data.model_dump())
        self.db.add(customer)
        self._commit()
        self.db.refresh(customer)
        return customer
    
    def has_orders(self, customer_id: int) -> bool:
        """Check whether any order references the customer"""
        return self.db.query(Order.id).filter(Order.customer_id == customer_id).first() is not None
    
    def delete(self, customer: Customer) -> None:
        """Delete customer"""
        self.db.delete(customer)
        self._commit()
    
    def count(self) -> int:
        """Get total count of customers"""
        return self.db.query(Customer).count()
