from sqlalchemy.engine import Engine

from restaurant_admin.db.base import Base
from restaurant_admin.db.session import engine as default_engine

# Register every mapped table on Base.metadata
from restaurant_admin.models.plan import Plan  # noqa: F401
from restaurant_admin.models.restaurant import Restaurant  # noqa: F401
from restaurant_admin.models.subscription import RestaurantSubscription  # noqa: F401

def create_tables(engine: Engine | None = None) -> None:
    Base.metadata.create_all(bind=engine or default_engine)
