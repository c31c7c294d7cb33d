from datetime import datetime
from uuid import uuid4
from sqlalchemy import ForeignKey, Enum, DateTime, String, Boolean, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from restaurant_admin.db.base import Base
from restaurant_admin.utils.dt import utcnow

SUBSCRIPTION_STATUSES = ("active", "cancelled", "expired", "pending")

class RestaurantSubscription(Base):
    __tablename__ = "restaurant_subscriptions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))

    # Exactly one row per restaurant, see uq_restaurant_subscriptions_restaurant
    restaurant_id: Mapped[str] = mapped_column(
        ForeignKey("restaurants.id", ondelete="CASCADE")
    )
    plan_id: Mapped[str] = mapped_column(
        ForeignKey("subscription_plans.id", ondelete="RESTRICT"), index=True
    )

    # Stored status. Lapse after current_period_end is derived at read time, never written
    status: Mapped[str] = mapped_column(
        Enum(*SUBSCRIPTION_STATUSES, name="subscription_status"),
        default="active",
        index=True
    )

    current_period_start: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    current_period_end: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    # active + cancel_at_period_end = usable until period end, no renewal
    cancel_at_period_end: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at : Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    updated_at : Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    restaurant = relationship("Restaurant", back_populates="subscription")
    plan = relationship("Plan")

    __table_args__ = (
        UniqueConstraint("restaurant_id", name="uq_restaurant_subscriptions_restaurant"),
        CheckConstraint(
            "current_period_end > current_period_start",
            name="ck_restaurant_subscriptions_period_order",
        ),
    )
