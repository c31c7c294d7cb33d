from sqlalchemy.orm import Session
from restaurant_admin.db.init_db import create_tables
from restaurant_admin.db.session import SessionLocal
from restaurant_admin.models.plan import Plan

PLANS = [
    {"name": "Starter Monthly", "description": "Menu and ordering for a single location",
     "price": 29.00, "interval": "monthly",
     "features": ["Digital menu", "Table ordering", "Email support"]},

    {"name": "Starter Quarterly", "description": "Starter, billed every three months",
     "price": 79.00, "interval": "quarterly",
     "features": ["Digital menu", "Table ordering", "Email support"]},

    {"name": "Pro Half-Yearly", "description": "Adds analytics and staff accounts",
     "price": 149.00, "interval": "half_yearly",
     "features": ["Digital menu", "Table ordering", "Sales analytics", "Staff accounts", "Priority support"]},

    {"name": "Pro Yearly", "description": "Pro, billed once a year",
     "price": 279.00, "interval": "yearly",
     "features": ["Digital menu", "Table ordering", "Sales analytics", "Staff accounts", "Priority support"]},
]

def upsert_plan(db: Session, data: dict) -> Plan:
    plan = db.query(Plan).filter(Plan.name == data["name"]).first()
    if plan:
        for k, v in data.items():
            setattr(plan, k, v)
        return plan

    plan = Plan(**data, is_active=True)
    db.add(plan)
    return plan

def main():
    create_tables()
    db = SessionLocal()
    try:
        for data in PLANS:
            upsert_plan(db, data)
        db.commit()
        print("Seeded plans:", [p["name"] for p in PLANS])
    finally:
        db.close()

if __name__ == "__main__":
    main()
