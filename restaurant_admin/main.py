import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from restaurant_admin.core.config import settings
from restaurant_admin.core.errors import (
    NotSubscribed,
    PersistenceError,
    PlanNotFound,
    SubscriptionError,
    TenantNotFound,
)
from restaurant_admin.core.logging import configure_logging

# Import routers
from restaurant_admin.api.billing import router as billing_router
from restaurant_admin.api.subscriptions import router as subscriptions_router

logger = logging.getLogger(__name__)

# Engine errors -> HTTP status; message is passed through as-is
ERROR_STATUS = {
    PlanNotFound: 404,
    TenantNotFound: 404,
    NotSubscribed: 409,
    PersistenceError: 503,
}

def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.app_name)

    @app.get("/health")
    def health():
        return {"status" : "ok", "env" : settings.app_env}

    @app.exception_handler(SubscriptionError)
    async def subscription_error_handler(request: Request, exc: SubscriptionError):
        status = ERROR_STATUS.get(type(exc), 400)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status, content={"detail": str(exc)})

    # Include billing routes
    app.include_router(billing_router)
    # Include restaurant subscription routes
    app.include_router(subscriptions_router)

    return app

app = create_app()
