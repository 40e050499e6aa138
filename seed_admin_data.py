#!/usr/bin/env python3
"""
Admin Seed Data Script

Creates the initial admin account, two demo customers and the default site
settings for TourPro. Run it once after the database is reachable; accounts
that already exist are left untouched.

Usage:
    python seed_admin_data.py
"""

from tourpro.database import SessionLocal, create_tables
from tourpro.logging_config import configure_logging
from tourpro.enums import UserRole
from tourpro.auth.schemas import UserCreate
from tourpro.auth.service import UserService
from tourpro.admin.settings_service import SiteSettingsService

ACCOUNTS = [
    (UserCreate(name="Admin User", email="admin@tourpro.com", password="admin123", phone="+1-555-0100"), UserRole.ADMIN),
    (UserCreate(name="John Doe", email="john@example.com", password="user123", phone="+1-555-0101"), UserRole.USER),
    (UserCreate(name="Jane Smith", email="jane@example.com", password="user123", phone="+1-555-0102"), UserRole.USER),
]

def create_initial_accounts(db):
    """Create the admin and demo customer accounts"""
    print("🔧 Creating initial accounts...")

    for account, role in ACCOUNTS:
        if UserService.get_user_by_email(db, account.email):
            print(f"✅ {account.email} already exists, skipping...")
            continue
        UserService.create_user(db, account, role=role)
        print(f"✅ Created {role.value} {account.email}")

def create_default_settings(db):
    """Create the site settings row with defaults"""
    print("🔧 Creating default site settings...")
    settings = SiteSettingsService(db).get_settings()
    print(f"✅ Site settings ready: {settings.site_name}")

def main():
    configure_logging()
    create_tables()

    db = SessionLocal()
    try:
        create_initial_accounts(db)
        create_default_settings(db)
        print("\n🎉 Admin seed data created successfully!")
        print("   Admin login: admin@tourpro.com / admin123")
    except Exception as e:
        print(f"❌ Error creating admin seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    main()
