"""
Seed Admin Script
Creates an admin user, or promotes an existing user to admin.
Registration only ever creates members, so the first admin comes from here.

Usage:
    python -m app.scripts.seed_admin --email admin@example.com --name Admin --password secret
"""

import argparse
import sys

from app.core.enums import UserRole
from app.core.errors import DomainError
from app.core.models import new_id, utcnow
from app.core.security import hash_password
from app.database.supabase_client import SupabaseClient
from app.modules.users.models import User, normalize_email
from app.modules.users.repository import UserRepository
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_admin(supabase: Client, email: str, name: str, password: str) -> User:
    """Create the admin, or promote the existing user with this email"""
    users = UserRepository(supabase)
    email = normalize_email(email)
    existing = users.find_by_email(email)

    if existing is not None:
        if existing.role == UserRole.ADMIN:
            logger.info(f"User {email} is already an admin")
            return existing
        logger.info(f"Promoting existing user {email} to admin")
        return users.update(existing.apply({"role": UserRole.ADMIN}))

    now = utcnow()
    admin = users.create(User(
        id=new_id(),
        email=email,
        password_hash=hash_password(password),
        name=name,
        role=UserRole.ADMIN,
        created_at=now,
        updated_at=now,
    ))
    logger.info(f"Created admin user {email} ({admin.id})")
    return admin


def main(argv=None):
    """Main function to seed the admin user"""
    parser = argparse.ArgumentParser(description="Create or promote an admin user")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", default="Administrator")
    parser.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    try:
        seed_admin(SupabaseClient.get_service_client(), args.email, args.name, args.password)
        logger.info("Seeding completed successfully!")
    except DomainError as e:
        logger.error(f"Error during seeding: {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
