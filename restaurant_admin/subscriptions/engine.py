import logging
from datetime import datetime

from restaurant_admin.core.errors import NotSubscribed, PlanNotFound, TenantNotFound
from restaurant_admin.models.plan import Plan
from restaurant_admin.models.restaurant import Restaurant
from restaurant_admin.models.subscription import RestaurantSubscription
from restaurant_admin.subscriptions.periods import compute_period_end
from restaurant_admin.subscriptions.status import DisplayStatus, derive_status
from restaurant_admin.subscriptions.store import SubscriptionStore
from restaurant_admin.utils.dt import as_utc_aware, utcnow

logger = logging.getLogger(__name__)


class SubscriptionLifecycle:
    """
    Subscribe / cancel / reactivate for a single restaurant.

    Holds no state between calls. Every mutation is exactly one write against
    the store; errors from the store propagate unchanged and are never retried.
    """

    def __init__(self, store: SubscriptionStore):
        self.store = store

    def get_offerable_plans(self) -> list[Plan]:
        return self.store.list_active_plans()

    def get_display_status(self, restaurant_id: str, now: datetime | None = None) -> DisplayStatus:
        sub = self.store.get_subscription(restaurant_id)
        return derive_status(sub, _now(now))

    def list_restaurant_statuses(self, now: datetime | None = None) -> list[tuple[Restaurant, DisplayStatus]]:
        now = _now(now)
        return [
            (r, derive_status(r.subscription, now))
            for r in self.store.list_restaurants_with_subscriptions()
        ]

    def subscribe(
        self,
        restaurant_id: str,
        plan_id: str,
        now: datetime | None = None,
    ) -> RestaurantSubscription:
        now = _now(now)

        plan = self.store.get_active_plan(plan_id)
        if plan is None:
            raise PlanNotFound(plan_id)
        if not self.store.restaurant_exists(restaurant_id):
            raise TenantNotFound(restaurant_id)

        # Upsert on restaurant_id: first subscribe, plan change and resubscribe
        # after expiry are the same write
        self.store.upsert_subscription(restaurant_id, {
            "plan_id": plan.id,
            "status": "active",
            "current_period_start": now,
            "current_period_end": compute_period_end(now, plan.interval),
            "cancel_at_period_end": False,
        })
        logger.info("Restaurant %s subscribed to plan %s (%s)", restaurant_id, plan.id, plan.interval)

        return self.store.get_subscription(restaurant_id)

    def cancel(self, restaurant_id: str, now: datetime | None = None) -> None:
        # Status is left as is; access continues until current_period_end
        touched = self.store.update_subscription(
            restaurant_id,
            {"cancel_at_period_end": True},
            only_active=True,
        )
        if not touched:
            raise NotSubscribed(restaurant_id, "has no active subscription")
        logger.info("Restaurant %s subscription set to cancel at period end", restaurant_id)

    def reactivate(self, restaurant_id: str, now: datetime | None = None) -> None:
        # Manual override: the period is not rolled forward, so a lapsed
        # subscription still derives as Expired afterwards
        touched = self.store.update_subscription(
            restaurant_id,
            {"cancel_at_period_end": False, "status": "active"},
        )
        if not touched:
            raise NotSubscribed(restaurant_id)
        logger.info("Restaurant %s subscription reactivated", restaurant_id)


def _now(now: datetime | None) -> datetime:
    return as_utc_aware(now) if now is not None else utcnow()
