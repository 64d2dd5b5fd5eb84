"""
Product Service - Business Logic Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from shop_analytics.database import data_source_guard
from shop_analytics.exceptions import ReferentialIntegrityError
from shop_analytics.logger import get_logger
from shop_analytics.repositories.product_repository import ProductRepository
from shop_analytics.schemas.product import ProductCreate, ProductResponse

log = get_logger(__name__)


class ProductService:
    """Service layer for product catalog records"""
    
    def __init__(self, db: Session):
        self.repository = ProductRepository(db)
    
    def get_all_products(self, skip: int = 0, limit: int = 100) -> List[ProductResponse]:
        """Get all products with pagination"""
        with data_source_guard("get_all_products"):
            products = self.repository.get_all(skip=skip, limit=limit)
        return [ProductResponse.model_validate(p) for p in products]
    
    def get_product_by_id(self, product_id: int) -> Optional[ProductResponse]:
        """Get product by ID"""
        with data_source_guard("get_product_by_id"):
            product = self.repository.get_by_id(product_id)
        if not product:
            return None
        return ProductResponse.model_validate(product)
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create new product"""
        with data_source_guard("create_product"):
            product = self.repository.create(product_data)
        log.info("Product %s created in category %r", product.id, product.category)
        return ProductResponse.model_validate(product)
    
    def update_stock(self, product_id: int, quantity_change: int) -> Optional[ProductResponse]:
        """
        Restock (positive) or sell (negative) a product
        
        The change is applied in the database against the current stock, so
        concurrent sales cannot push it below zero.
        
        Returns:
            Updated product or None if not found
        
        Raises:
            InsufficientStockError: If resulting stock would be negative
        """
        with data_source_guard("update_stock"):
            product = self.repository.get_by_id(product_id)
            if not product:
                return None
            
            product = self.repository.update_stock(product, quantity_change)
        
        log.info("Stock of product %s changed by %+d to %s", product_id, quantity_change, product.stock_quantity)
        return ProductResponse.model_validate(product)
    
    def delete_product(self, product_id: int) -> bool:
        """
        Delete product
        
        Raises:
            ReferentialIntegrityError: If any order item references the product
        """
        with data_source_guard("delete_product"):
            product = self.repository.get_by_id(product_id)
            if not product:
                return False
            if self.repository.is_referenced(product_id):
                raise ReferentialIntegrityError(
                    f"Product {product_id} appears on order items and cannot be deleted"
                )
            
            self.repository.delete(product)
        
        log.info("Product %s deleted", product_id)
        return True
