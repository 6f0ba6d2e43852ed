"""Initialize the database - creates all tables and optionally seeds an admin.

Usage:
  python scripts/init_db.py
  python scripts/init_db.py --admin-email admin@example.com --admin-name Admin
"""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import engine, Base, SessionLocal
from app.models.user import User
from app.utils.permissions import ADMIN
import app.models  # noqa: F401 - registers all models


def init_db(admin_email: str | None = None, admin_name: str = "Admin"):
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)

    if admin_email:
        db = SessionLocal()
        try:
            email = admin_email.strip().lower()
            if db.query(User).filter(User.email == email).first():
                print(f"Admin '{email}' already exists.")
            else:
                db.add(User(email=email, name=admin_name, role=ADMIN))
                db.commit()
                print(f"Admin '{email}' created.")
        finally:
            db.close()

    print("Database initialized successfully.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--admin-email", default=None, help="Seed an admin account with this email")
    parser.add_argument("--admin-name", default="Admin")
    args = parser.parse_args()
    init_db(args.admin_email, args.admin_name)
