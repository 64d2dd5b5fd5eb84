"""
Employee Service - Business Logic Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from shop_analytics.database import data_source_guard
from shop_analytics.logger import get_logger
from shop_analytics.repositories.employee_repository import EmployeeRepository
from shop_analytics.schemas.employee import EmployeeCreate, EmployeeResponse

log = get_logger(__name__)


class EmployeeService:
    """Service layer for employee records"""
    
    def __init__(self, db: Session):
        self.repository = EmployeeRepository(db)
    
    def get_all_employees(self, skip: int = 0, limit: int = 100) -> List[EmployeeResponse]:
        with data_source_guard("get_all_employees"):
            employees = self.repository.get_all(skip=skip, limit=limit)
        return [EmployeeResponse.model_validate(e) for e in employees]
    
    def get_employee_by_id(self, employee_id: int) -> Optional[EmployeeResponse]:
        with data_source_guard("get_employee_by_id"):
            employee = self.repository.get_by_id(employee_id)
        if not employee:
            return None
        return EmployeeResponse.model_validate(employee)
    
    def hire_employee(self, employee_data: EmployeeCreate) -> EmployeeResponse:
        with data_source_guard("hire_employee"):
            employee = self.repository.create(employee_data)
        log.info("Employee %s hired into %s", employee.id, employee.department)
        return EmployeeResponse.model_validate(employee)
