class SubscriptionError(Exception):
    """Base class for every error the subscription engine surfaces."""


class PlanNotFound(SubscriptionError):
    def __init__(self, plan_id: str):
        self.plan_id = plan_id
        super().__init__(f"Plan {plan_id} not found or not active")


class TenantNotFound(SubscriptionError):
    def __init__(self, restaurant_id: str):
        self.restaurant_id = restaurant_id
        super().__init__(f"Restaurant {restaurant_id} not found")


class NotSubscribed(SubscriptionError):
    def __init__(self, restaurant_id: str, detail: str = "has no subscription"):
        self.restaurant_id = restaurant_id
        super().__init__(f"Restaurant {restaurant_id} {detail}")


class PersistenceError(SubscriptionError):
    """The store rejected or failed a read/write. Original error is chained."""
