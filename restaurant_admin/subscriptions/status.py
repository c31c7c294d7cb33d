from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from restaurant_admin.models.subscription import RestaurantSubscription
from restaurant_admin.utils.dt import as_utc_aware


class PlanSummary(BaseModel):
    id: str
    name: str
    price: Decimal
    interval: str

    class Config:
        from_attributes = True


class NoSubscription(BaseModel):
    kind: Literal["none"] = "none"


class ActiveUntil(BaseModel):
    kind: Literal["active"] = "active"
    end_date: datetime
    plan: PlanSummary | None = None


class PendingCancellation(BaseModel):
    """Still usable until end_date, will not renew."""
    kind: Literal["pending_cancellation"] = "pending_cancellation"
    end_date: datetime
    plan: PlanSummary | None = None


class Expired(BaseModel):
    kind: Literal["expired"] = "expired"


DisplayStatus = Annotated[
    Union[NoSubscription, ActiveUntil, PendingCancellation, Expired],
    Field(discriminator="kind"),
]


def derive_status(sub: RestaurantSubscription | None, now: datetime) -> DisplayStatus:
    if sub is None:
        return NoSubscription()

    end = as_utc_aware(sub.current_period_end)
    if sub.status == "active" and as_utc_aware(now) < end:
        plan = PlanSummary.model_validate(sub.plan) if sub.plan is not None else None
        if sub.cancel_at_period_end:
            return PendingCancellation(end_date=end, plan=plan)
        return ActiveUntil(end_date=end, plan=plan)

    # Lapsed by calendar, or stored status is not active
    return Expired()
