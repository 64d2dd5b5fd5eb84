"""
Order Repository - Data Access Layer
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import desc

from shop_analytics.models.order import Order, OrderItem
from shop_analytics.models.product import Product
from shop_analytics.repositories.base import BaseRepository
from shop_analytics.repositories.product_repository import ProductRepository
from shop_analytics.exceptions import InsufficientStockError


class OrderRepository(BaseRepository):
    """Repository for Order rows and their items"""
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Order]:
        """Get all orders with pagination, newest first"""
        return self.db.query(Order).order_by(
            desc(Order.order_date), desc(Order.id)
        ).offset(skip).limit(limit).all()
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def get_by_customer(self, customer_id: int) -> List[Order]:
        """Get orders placed by a customer"""
        return self.db.query(Order).filter(
            Order.customer_id == customer_id
        ).order_by(desc(Order.order_date), desc(Order.id)).all()
    
    def create_with_items(
        self,
        customer_id: int,
        order_date: date,
        lines: List[Tuple[Product, int, Decimal]]
    ) -> Order:
        """
        Create an order, its items and the matching stock decrements in one transaction
        
        Stock is decremented with a conditional UPDATE, so a concurrent checkout
        that already took the units makes this one fail instead of overselling.
        
        Args:
            customer_id: Customer placing the order
            order_date: Checkout date
            lines: (product, quantity, item_price) per item
        
        Returns:
            Created order with items loaded
        
        Raises:
            InsufficientStockError: If stock no longer covers an item; nothing is written
            ReferentialIntegrityError: If the database rejects a reference
        """
        products = ProductRepository(self.db)
        total_amount = sum((price * quantity for _, quantity, price in lines), Decimal("0.00"))
        
        order = Order(
            customer_id=customer_id,
            order_date=order_date,
            total_amount=total_amount
        )
        for product, quantity, price in lines:
            if not products.adjust_stock(product.id, -quantity):
                self.db.rollback()
                raise InsufficientStockError(
                    f"Insufficient stock. Product ID: {product.id}, Requested: {quantity}"
                )
            order.items.append(OrderItem(
                product_id=product.id,
                quantity=quantity,
                item_price=price
            ))
        
        self.db.add(order)
        self._commit()
        self.db.refresh(order)
        return order
    
    def delete(self, order: Order) -> None:
        """Delete order together with its items"""
        self.db.delete(order)
        self._commit()
    
    def count(self) -> int:
        """Get total count of orders"""
        return self.db.query(Order).count()
