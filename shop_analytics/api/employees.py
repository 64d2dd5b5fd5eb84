"""
Employee API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from shop_analytics.database import get_db
from shop_analytics.exceptions import ReferentialIntegrityError
from shop_analytics.services.employee_service import EmployeeService
from shop_analytics.schemas.employee import EmployeeCreate, EmployeeResponse

router = APIRouter(prefix="/employees", tags=["employees"])


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    """Dependency to get EmployeeService instance"""
    return EmployeeService(db)


@router.get("", response_model=List[EmployeeResponse], summary="Get all employees")
def get_employees(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    service: EmployeeService = Depends(get_employee_service)
):
    return service.get_all_employees(skip=skip, limit=limit)


@router.get("/{employee_id}", response_model=EmployeeResponse, summary="Get employee by ID")
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service)
):
    employee = service.get_employee_by_id(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id={employee_id} not found"
        )
    return employee


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED, summary="Hire employee")
def hire_employee(
    employee_data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service)
):
    try:
        return service.hire_employee(employee_data)
    except ReferentialIntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
