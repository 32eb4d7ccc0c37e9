from datetime import datetime
from typing import Optional
from uuid import UUID

from app.core.schemas import BaseSchema


class SubscriptionBase(BaseSchema):
    user_id: UUID
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    stripe_price_id: Optional[str] = None
    stripe_current_period_end: Optional[datetime] = None
    plan_type: str


class SubscriptionCreate(SubscriptionBase):
    id: Optional[UUID] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SubscriptionUpdate(BaseSchema):
    id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    stripe_price_id: Optional[str] = None
    stripe_current_period_end: Optional[datetime] = None
    status: Optional[str] = None
    plan_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Subscription(SubscriptionBase):
    id: UUID
    status: str
    created_at: datetime
    updated_at: datetime
