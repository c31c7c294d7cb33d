"""
Shared fixtures: an in-memory SQLite database with the full schema,
a few plans, one restaurant, and an authenticated API client.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from restaurant_admin.core.security import create_access_token
from restaurant_admin.db.init_db import create_tables
from restaurant_admin.db.session import enable_sqlite_foreign_keys, get_db
from restaurant_admin.main import app
from restaurant_admin.models.plan import Plan
from restaurant_admin.models.restaurant import Restaurant
from restaurant_admin.subscriptions.engine import SubscriptionLifecycle
from restaurant_admin.subscriptions.store import SubscriptionStore


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def plans(db):
    """Three offerable plans plus one retired plan, keyed by short name."""
    plans = {
        "yearly": Plan(id="plan-yearly", name="Pro Yearly", price=Decimal("279.00"),
                       interval="yearly", features=["Analytics", "Staff accounts"], is_active=True),
        "monthly": Plan(id="plan-monthly", name="Starter Monthly", price=Decimal("29.00"),
                        interval="monthly", features=["Digital menu"], is_active=True),
        "quarterly": Plan(id="plan-quarterly", name="Starter Quarterly", price=Decimal("79.00"),
                          interval="quarterly", features=["Digital menu"], is_active=True),
        "retired": Plan(id="plan-retired", name="Legacy Monthly", price=Decimal("9.00"),
                        interval="monthly", features=[], is_active=False),
    }
    db.add_all(plans.values())
    db.commit()
    return plans


@pytest.fixture
def restaurant(db):
    r = Restaurant(id="rest-a", name="Trattoria A", email="owner@trattoria.test",
                   created_at=utc(2024, 1, 1))
    db.add(r)
    db.commit()
    return r


@pytest.fixture
def lifecycle(db):
    return SubscriptionLifecycle(SubscriptionStore(db))


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_access_token('admin-1')}"}


@pytest.fixture
def client(db):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
