from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from app.core.schemas import BaseSchema


class ClinicBase(BaseSchema):
    user_id: UUID
    name: str
    phone: str
    specialties: List[str]
    cep: str
    address: str
    number: str
    complement: Optional[str] = None
    city: str
    state: str = Field(min_length=2, max_length=2)


class ClinicCreate(ClinicBase):
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ClinicUpdate(BaseSchema):
    id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    specialties: Optional[List[str]] = None
    cep: Optional[str] = None
    address: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = Field(default=None, min_length=2, max_length=2)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Clinic(ClinicBase):
    id: UUID
    created_at: datetime
    updated_at: datetime
