from fastapi import APIRouter, Depends, Response

from restaurant_admin.api.deps import get_current_admin, get_lifecycle
from restaurant_admin.schemas.subscriptions import (
    RestaurantStatusOut,
    SubscribeIn,
    SubscriptionOut,
    SubscriptionStatusOut,
)
from restaurant_admin.subscriptions.engine import SubscriptionLifecycle

router = APIRouter(
    prefix="/admin/restaurants",
    tags=["subscriptions"],
    dependencies=[Depends(get_current_admin)],
)

# Restaurant table: every tenant, newest first, with its derived status
@router.get("/subscriptions", response_model=list[RestaurantStatusOut])
def list_restaurant_statuses(lifecycle: SubscriptionLifecycle = Depends(get_lifecycle)):
    return [
        RestaurantStatusOut(
            restaurant_id=r.id,
            name=r.name,
            email=r.email,
            created_at=r.created_at,
            subscription=status,
        )
        for r, status in lifecycle.list_restaurant_statuses()
    ]

@router.get("/{restaurant_id}/subscription", response_model=SubscriptionStatusOut)
def get_subscription_status(
    restaurant_id: str,
    lifecycle: SubscriptionLifecycle = Depends(get_lifecycle),
):
    return SubscriptionStatusOut(
        restaurant_id=restaurant_id,
        subscription=lifecycle.get_display_status(restaurant_id),
    )

@router.post("/{restaurant_id}/subscription", response_model=SubscriptionOut)
def subscribe(
    restaurant_id: str,
    payload: SubscribeIn,
    lifecycle: SubscriptionLifecycle = Depends(get_lifecycle),
):
    return lifecycle.subscribe(restaurant_id, payload.plan_id)

@router.post("/{restaurant_id}/subscription/cancel", status_code=204)
def cancel(
    restaurant_id: str,
    lifecycle: SubscriptionLifecycle = Depends(get_lifecycle),
):
    lifecycle.cancel(restaurant_id)
    return Response(status_code=204)

@router.post("/{restaurant_id}/subscription/reactivate", status_code=204)
def reactivate(
    restaurant_id: str,
    lifecycle: SubscriptionLifecycle = Depends(get_lifecycle),
):
    lifecycle.reactivate(restaurant_id)
    return Response(status_code=204)
