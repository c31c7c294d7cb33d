import logging
from typing import Any
from uuid import uuid4

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from restaurant_admin.core.errors import PersistenceError
from restaurant_admin.models.plan import Plan
from restaurant_admin.models.restaurant import Restaurant
from restaurant_admin.models.subscription import RestaurantSubscription
from restaurant_admin.utils.dt import utcnow

logger = logging.getLogger(__name__)

# Dialects that support INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}

# Columns an upsert replaces on conflict. id, restaurant_id and created_at stay put.
_REPLACED_COLUMNS = (
    "plan_id",
    "status",
    "current_period_start",
    "current_period_end",
    "cancel_at_period_end",
    "updated_at",
)


class SubscriptionStore:
    """Data access for plans and restaurant subscriptions.

    Each write is a single statement followed by a commit. Any SQLAlchemy
    failure rolls the session back and surfaces as PersistenceError.
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------------------------
    # reads
    # ---------------------------

    def list_active_plans(self) -> list[Plan]:
        stmt = select(Plan).where(Plan.is_active.is_(True)).order_by(Plan.price.asc())
        return list(self._run(lambda: self.db.scalars(stmt).all(), "list active plans"))

    def get_active_plan(self, plan_id: str) -> Plan | None:
        stmt = select(Plan).where(Plan.id == plan_id, Plan.is_active.is_(True))
        return self._run(lambda: self.db.scalars(stmt).first(), "load plan")

    def restaurant_exists(self, restaurant_id: str) -> bool:
        stmt = select(Restaurant.id).where(Restaurant.id == restaurant_id)
        return self._run(lambda: self.db.scalars(stmt).first(), "load restaurant") is not None

    def get_subscription(self, restaurant_id: str) -> RestaurantSubscription | None:
        stmt = (
            select(RestaurantSubscription)
            .options(joinedload(RestaurantSubscription.plan))
            .where(RestaurantSubscription.restaurant_id == restaurant_id)
            .execution_options(populate_existing=True)
        )
        return self._run(lambda: self.db.scalars(stmt).first(), "load subscription")

    def list_restaurants_with_subscriptions(self) -> list[Restaurant]:
        stmt = (
            select(Restaurant)
            .options(joinedload(Restaurant.subscription).joinedload(RestaurantSubscription.plan))
            .order_by(Restaurant.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(self._run(lambda: self.db.scalars(stmt).unique().all(), "list restaurants"))

    # ---------------------------
    # writes
    # ---------------------------

    def upsert_subscription(self, restaurant_id: str, values: dict[str, Any]) -> None:
        """Insert the restaurant's row, or replace it if one exists."""
        dialect = self.db.get_bind().dialect.name
        try:
            insert = _UPSERT_INSERTS[dialect]
        except KeyError:
            raise PersistenceError(f"Upsert is not supported on the {dialect} dialect") from None

        now = utcnow()
        row = {
            **values,
            "id": str(uuid4()),
            "restaurant_id": restaurant_id,
            "created_at": now,
            "updated_at": now,
        }
        stmt = insert(RestaurantSubscription.__table__).values(**row)
        stmt = stmt.on_conflict_do_update(
            index_elements=[RestaurantSubscription.__table__.c.restaurant_id],
            set_={name: stmt.excluded[name] for name in _REPLACED_COLUMNS},
        )
        self._write(stmt, "upsert subscription")

    def update_subscription(
        self,
        restaurant_id: str,
        values: dict[str, Any],
        only_active: bool = False,
    ) -> int:
        """Partial update keyed on restaurant. Returns the number of rows touched."""
        stmt = (
            update(RestaurantSubscription.__table__)
            .where(RestaurantSubscription.__table__.c.restaurant_id == restaurant_id)
            .values(**values, updated_at=utcnow())
        )
        if only_active:
            stmt = stmt.where(RestaurantSubscription.__table__.c.status == "active")
        return self._write(stmt, "update subscription").rowcount

    # ---------------------------
    # helpers
    # ---------------------------

    def _write(self, stmt, what: str):
        def _exec():
            result = self.db.execute(stmt)
            self.db.commit()
            return result
        return self._run(_exec, what)

    def _run(self, fn, what: str):
        try:
            return fn()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Store failed to %s: %s", what, exc)
            raise PersistenceError(f"Could not {what}: {exc}") from exc
