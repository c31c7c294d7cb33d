from datetime import datetime
from uuid import uuid4
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from restaurant_admin.db.base import Base
from restaurant_admin.utils.dt import utcnow

class Restaurant(Base):
    """Tenant row. Created and edited by the restaurant CRUD screens."""

    __tablename__ = "restaurants"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))

    name: Mapped[str] = mapped_column(String(200))
    address: Mapped[str | None] = mapped_column(String(300), nullable=True)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    subscription = relationship(
        "RestaurantSubscription",
        back_populates="restaurant",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
