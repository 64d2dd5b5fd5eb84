"""
Order Service - Business Logic Layer
"""
from collections import defaultdict
from typing import List, Optional
from sqlalchemy.orm import Session

from shop_analytics.database import data_source_guard
from shop_analytics.exceptions import ReferentialIntegrityError, InsufficientStockError
from shop_analytics.logger import get_logger
from shop_analytics.repositories.customer_repository import CustomerRepository
from shop_analytics.repositories.order_repository import OrderRepository
from shop_analytics.repositories.product_repository import ProductRepository
from shop_analytics.schemas.order import OrderCreate, OrderResponse

log = get_logger(__name__)


class OrderService:
    """Service layer for checkout and order lookups"""
    
    def __init__(self, db: Session):
        self.repository = OrderRepository(db)
        self.customer_repository = CustomerRepository(db)
        self.product_repository = ProductRepository(db)
    
    def get_all_orders(self, skip: int = 0, limit: int = 100) -> List[OrderResponse]:
        """Get all orders with pagination"""
        with data_source_guard("get_all_orders"):
            orders = self.repository.get_all(skip=skip, limit=limit)
            return [OrderResponse.model_validate(o) for o in orders]
    
    def get_order_by_id(self, order_id: int) -> Optional[OrderResponse]:
        """Get order by ID"""
        with data_source_guard("get_order_by_id"):
            order = self.repository.get_by_id(order_id)
            if not order:
                return None
            return OrderResponse.model_validate(order)
    
    def get_orders_by_customer(self, customer_id: int) -> List[OrderResponse]:
        """Get orders placed by a customer"""
        with data_source_guard("get_orders_by_customer"):
            orders = self.repository.get_by_customer(customer_id)
            return [OrderResponse.model_validate(o) for o in orders]
    
    def place_order(self, order_data: OrderCreate) -> OrderResponse:
        """
        Place a new order
        
        Steps:
        1. Check the customer exists
        2. Lock the products and check they all exist
        3. Check stock covers the requested quantities
        4. Price each item (request price or current product price)
        5. Save order, items and stock decrements in one transaction
        
        Args:
            order_data: Order creation data
        
        Returns:
            Created order, total_amount equal to the sum of its items
        
        Raises:
            ReferentialIntegrityError: If the customer or a product does not exist
            InsufficientStockError: If stock does not cover an item
            DataSourceUnavailableError: If the database is unreachable
        """
        with data_source_guard("place_order"):
            # Step 1: Customer must exist
            if not self.customer_repository.get_by_id(order_data.customer_id):
                raise ReferentialIntegrityError(f"Customer {order_data.customer_id} does not exist")
            
            # Step 2: Products must exist; rows stay locked until commit
            requested = defaultdict(int)
            for item in order_data.items:
                requested[item.product_id] += item.quantity
            
            products = {p.id: p for p in self.product_repository.get_by_ids(list(requested), lock=True)}
            missing = sorted(set(requested) - set(products))
            if missing:
                self.repository.db.rollback()
                raise ReferentialIntegrityError(f"Products do not exist: {missing}")
            
            # Step 3: Stock must cover every product across all lines
            for product_id, quantity in requested.items():
                product = products[product_id]
                if product.stock_quantity < quantity:
                    self.repository.db.rollback()
                    raise InsufficientStockError(
                        f"Insufficient stock. Product ID: {product_id}, "
                        f"Requested: {quantity}, Available: {product.stock_quantity}"
                    )
            
            # Step 4: Price items
            lines = []
            for item in order_data.items:
                product = products[item.product_id]
                price = item.item_price if item.item_price is not None else product.price
                lines.append((product, item.quantity, price))
            
            # Step 5: Save atomically
            order = self.repository.create_with_items(
                customer_id=order_data.customer_id,
                order_date=order_data.order_date,
                lines=lines
            )
            
            log.info(
                "Order %s placed for customer %s: %d items, total %s",
                order.id, order.customer_id, len(order.items), order.total_amount
            )
            return OrderResponse.model_validate(order)
    
    def delete_order(self, order_id: int) -> bool:
        """Delete order and, with it, its items"""
        with data_source_guard("delete_order"):
            order = self.repository.get_by_id(order_id)
            if not order:
                return False
            
            self.repository.delete(order)
        
        log.info("Order %s deleted", order_id)
        return True
