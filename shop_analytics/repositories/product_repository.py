"""
Product Repository - Data Access Layer
"""
from typing import List, Optional

from sqlalchemy import update

from shop_analytics.models.product import Product
from shop_analytics.models.order import OrderItem
from shop_analytics.repositories.base import BaseRepository
from shop_analytics.schemas.product import ProductCreate
from shop_analytics.exceptions import InsufficientStockError


class ProductRepository(BaseRepository):
    """Repository for Product rows"""
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Product]:
        """Get all products with pagination"""
        return self.db.query(Product).order_by(Product.id).offset(skip).limit(limit).all()
    
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def get_by_ids(self, product_ids: List[int], lock: bool = False) -> List[Product]:
        """
        Get every product whose ID is in the given list
        
        Args:
            product_ids: Product IDs
            lock: Take row locks (SELECT ... FOR UPDATE) until the transaction ends
        """
        query = self.db.query(Product).filter(Product.id.in_(product_ids))
        if lock:
            # Lock in ID order so concurrent checkouts cannot deadlock
            query = query.order_by(Product.id).with_for_update().populate_existing()
        return query.all()
    
    def create(self, product_data: ProductCreate) -> Product:
        """Create new product"""
        product = Product(**product_data.model_dump())
        self.db.add(product)
        self._commit()
        self.db.refresh(product)
        return product
    
    def adjust_stock(self, product_id: int, quantity_change: int) -> bool:
        """
        Change stock in place without committing
        
        The update only matches while the resulting stock stays non-negative,
        so a stale read can never oversell.
        
        Returns:
            False if the current stock does not cover the change
        """
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock_quantity + quantity_change >= 0)
            .values(stock_quantity=Product.stock_quantity + quantity_change)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
    
    def update_stock(self, product: Product, quantity_change: int) -> Product:
        """
        Update product stock by adding/subtracting quantity
        
        Args:
            product: Product row
            quantity_change: Positive to add, negative to subtract
        
        Raises:
            InsufficientStockError: If stock would become negative
        """
        if not self.adjust_stock(product.id, quantity_change):
            self.db.rollback()
            self.db.refresh(product)
            raise InsufficientStockError(
                f"Insufficient stock. Current: {product.stock_quantity}, requested change: {quantity_change}"
            )
        
        self._commit()
        self.db.refresh(product)
        return product
    
    def is_referenced(self, product_id: int) -> bool:
        """Check whether any order item references the product"""
        return self.db.query(OrderItem.id).filter(OrderItem.product_id == product_id).first() is not None
    
    def delete(self, product: Product) -> None:
        """Delete product"""
        self.db.delete(product)
        self._commit()
    
    def count(self) -> int:
        """Get total count of products"""
        return self.db.query(Product).count()
