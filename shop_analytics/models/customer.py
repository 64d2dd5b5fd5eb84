"""
SQLAlchemy Customer model
"""
from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from shop_analytics.database import Base


class Customer(Base):
    """Customer database model"""
    
    __tablename__ = "customers"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    contact = Column(String(255), nullable=True)
    join_date = Column(Date, nullable=False, index=True)
    
    # Referenced, not owned: orders block deletion
    orders = relationship("Order", back_populates="customer", passive_deletes="all")
    
    def __repr__(self):
        return f"<Customer(id={self.id}, name='{self.name}', join_date={self.join_date})>"
