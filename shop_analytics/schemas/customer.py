"""
Pydantic schemas for Customer request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import date


class CustomerBase(BaseModel):
    """Base Customer schema with common fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Customer name")
    contact: Optional[str] = Field(None, max_length=255, description="Email or phone")
    join_date: date = Field(default_factory=date.today, description="Signup date")


class CustomerCreate(CustomerBase):
    """Schema for creating a new customer"""

    @field_validator("join_date")
    @classmethod
    def join_date_not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("join_date cannot be in the future")
        return value


class CustomerResponse(CustomerBase):
    """Schema for customer response"""
    id: int
    
    model_config = ConfigDict(from_attributes=True)
