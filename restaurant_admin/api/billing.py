from fastapi import APIRouter, Depends

from restaurant_admin.api.deps import get_current_admin, get_lifecycle
from restaurant_admin.schemas.subscriptions import PlanOut
from restaurant_admin.subscriptions.engine import SubscriptionLifecycle

router = APIRouter(prefix="/billing", tags=["billing"], dependencies=[Depends(get_current_admin)])

# Plans that can be offered to a restaurant, cheapest first
@router.get("/plans", response_model=list[PlanOut])
def list_plans(lifecycle: SubscriptionLifecycle = Depends(get_lifecycle)):
    return lifecycle.get_offerable_plans()
