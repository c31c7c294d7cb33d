from decimal import Decimal
from uuid import uuid4
from sqlalchemy import String, Enum, Numeric, Boolean, Text, JSON, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from restaurant_admin.db.base import Base

# Billing period lengths a plan can renew on
PLAN_INTERVALS = ("monthly", "quarterly", "half_yearly", "yearly")

class Plan(Base):
    __tablename__ = "subscription_plans"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))

    name: Mapped[str] = mapped_column(String(120))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Money (use Numeric for currency)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2))

    interval: Mapped[str] = mapped_column(
        Enum(*PLAN_INTERVALS, name="plan_interval")
    )

    # Ordered list of feature strings shown on the plan card
    features: Mapped[list[str]] = mapped_column(JSON, default=list)

    # Retired plans stay for existing subscriptions but are not offerable
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_subscription_plans_price_nonneg"),
    )
