"""
Employee Repository - Data Access Layer
"""
from typing import List, Optional

from shop_analytics.models.employee import Employee
from shop_analytics.repositories.base import BaseRepository
from shop_analytics.schemas.employee import EmployeeCreate


class EmployeeRepository(BaseRepository):
    """Repository for Employee rows"""
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Employee]:
        """Get all employees with pagination"""
        return self.db.query(Employee).order_by(Employee.id).offset(skip).limit(limit).all()
    
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Get employee by ID"""
        return self.db.query(Employee).filter(Employee.id == employee_id).first()
    
    def create(self, employee_data: EmployeeCreate) -> Employee:
        """Create new employee"""
        employee = Employee(**employee_data.model_dump())
        self.db.add(employee)
        self._commit()
        self.db.refresh(employee)
        return employee
