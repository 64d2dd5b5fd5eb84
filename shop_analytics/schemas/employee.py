"""
Pydantic schemas for Employee request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import date
from decimal import Decimal


class EmployeeBase(BaseModel):
    """Base Employee schema with common fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Employee name")
    contact: Optional[str] = Field(None, max_length=255)
    hire_date: date = Field(default_factory=date.today)
    department: str = Field(..., min_length=1, max_length=100)
    salary: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Salary (non-negative)")


class EmployeeCreate(EmployeeBase):
    """Schema for hiring a new employee"""
    pass


class EmployeeResponse(EmployeeBase):
    """Schema for employee response"""
    id: int
    
    model_config = ConfigDict(from_attributes=True)
