from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr

from app.core.schemas import BaseSchema


class ProfileBase(BaseSchema):
    email: EmailStr
    name: Optional[str] = None


class ProfileCreate(ProfileBase):
    # The profile id is the id of the authenticated user, never generated by the store
    id: UUID
    onboarding_status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdate(BaseSchema):
    id: Optional[UUID] = None
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    onboarding_status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Profile(ProfileBase):
    id: UUID
    onboarding_status: str
    created_at: datetime
    updated_at: datetime
