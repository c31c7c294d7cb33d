from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from restaurant_admin.core.config import settings
from restaurant_admin.core.security import decode_token
from restaurant_admin.db.session import get_db
from restaurant_admin.subscriptions.engine import SubscriptionLifecycle
from restaurant_admin.subscriptions.store import SubscriptionStore

bearer_scheme = HTTPBearer(auto_error=False)

def get_current_admin(
        creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    if creds is None:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    try:
        payload = decode_token(creds.credentials)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    if not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid token (missing sub)")
    if payload.get("role") != settings.admin_role:
        raise HTTPException(status_code=403, detail="Admin role required")
    return payload

def get_lifecycle(db: Session = Depends(get_db)) -> SubscriptionLifecycle:
    return SubscriptionLifecycle(SubscriptionStore(db))
