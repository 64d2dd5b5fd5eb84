"""
Customer Service - Business Logic Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from shop_analytics.database import data_source_guard
from shop_analytics.exceptions import ReferentialIntegrityError
from shop_analytics.logger import get_logger
from shop_analytics.repositories.customer_repository import CustomerRepository
from shop_analytics.schemas.customer import CustomerCreate, CustomerResponse

log = get_logger(__name__)


class CustomerService:
    """Service layer for customer records"""
    
    def __init__(self, db: Session):
        self.repository = CustomerRepository(db)
    
    def get_all_customers(self, skip: int = 0, limit: int = 100) -> List[CustomerResponse]:
        """Get all customers with pagination"""
        with data_source_guard("get_all_customers"):
            customers = self.repository.get_all(skip=skip, limit=limit)
        return [CustomerResponse.model_validate(c) for c in customers]
    
    def get_customer_by_id(self, customer_id: int) -> Optional[CustomerResponse]:
        """Get customer by ID"""
        with data_source_guard("get_customer_by_id"):
            customer = self.repository.get_by_id(customer_id)
        if not customer:
            return None
        return CustomerResponse.model_validate(customer)
    
    def create_customer(self, customer_data: CustomerCreate) -> CustomerResponse:
        """Register new customer"""
        with data_source_guard("create_customer"):
            customer = self.repository.create(customer_data)
        log.info("Customer %s created", customer.id)
        return CustomerResponse.model_validate(customer)
    
    def delete_customer(self, customer_id: int) -> bool:
        """
        Delete customer
        
        Returns:
            False if the customer does not exist
        
        Raises:
            ReferentialIntegrityError: If the customer has orders
        """
        with data_source_guard("delete_customer"):
            customer = self.repository.get_by_id(customer_id)
            if not customer:
                return False
            if self.repository.has_orders(customer_id):
                raise ReferentialIntegrityError(
                    f"Customer {customer_id} has orders and cannot be deleted"
                )
            
            self.repository.delete(customer)
        
        log.info("Customer %s deleted", customer_id)
        return True
