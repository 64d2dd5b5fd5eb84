"""
SQLAlchemy Employee model
"""
from sqlalchemy import Column, Integer, String, Numeric, Date, CheckConstraint
from shop_analytics.database import Base


class Employee(Base):
    """Employee database model"""
    
    __tablename__ = "employees"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    contact = Column(String(255), nullable=True)
    hire_date = Column(Date, nullable=False)
    department = Column(String(100), nullable=False, index=True)
    salary = Column(Numeric(10, 2), nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint('salary >= 0', name='check_salary_non_negative'),
    )
    
    def __repr__(self):
        return f"<Employee(id={self.id}, name='{self.name}', department='{self.department}')>"
