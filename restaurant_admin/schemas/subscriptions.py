from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel

from restaurant_admin.subscriptions.status import DisplayStatus

class PlanOut(BaseModel):
    id: str
    name: str
    description: str | None
    price: Decimal
    interval: str
    features: list[str]
    is_active: bool

    class Config:
        from_attributes = True

class SubscribeIn(BaseModel):
    plan_id: str

class SubscriptionOut(BaseModel):
    id: str
    restaurant_id: str
    plan_id: str
    status: str
    current_period_start: datetime
    current_period_end: datetime
    cancel_at_period_end: bool
    plan: PlanOut | None = None

    class Config:
        from_attributes = True

class RestaurantStatusOut(BaseModel):
    restaurant_id: str
    name: str
    email: str | None
    created_at: datetime
    subscription: DisplayStatus

class SubscriptionStatusOut(BaseModel):
    restaurant_id: str
    subscription: DisplayStatus
