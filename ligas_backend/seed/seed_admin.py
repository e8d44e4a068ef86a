"""
seed_admin.py
-------------
Seeds the administrator account (ROLE_ADMIN + ROLE_USER) from config.

✅ Safe to run multiple times: an existing account is left untouched.

Usage:
    python -m ligas_backend.seed.seed_admin
"""

from typing import Optional
from sqlmodel import Session, select

from ligas_backend.core import config
from ligas_backend.core.auth import pwd_context, normalize_email
from ligas_backend.core.database import get_sync_session, init_db
from ligas_backend.models.user_model import User


def seed_admin(session: Optional[Session] = None) -> bool:
    """Creates the admin user if missing. Returns True when a user was created."""
    own_session = session is None
    if own_session:
        session = get_sync_session()

    try:
        email = normalize_email(config.ADMIN_EMAIL)
        existing = session.exec(select(User).where(User.email == email)).first()
        if existing:
            print(f"✅ [SEED] Admin already exists: {email}")
            return False

        admin = User(
            email=email,
            name=config.ADMIN_NAME,
            password_hash=pwd_context.hash(config.ADMIN_PASSWORD),
            roles=[config.ROLE_ADMIN, config.ROLE_USER],
        )
        session.add(admin)
        session.commit()
        print(f"➕ [SEED] Admin created: {email}")
        return True
    finally:
        if own_session:
            session.close()


if __name__ == "__main__":
    init_db()
    seed_admin()
