"""
Database seeding script.

Inserts missing default site settings, optional demo ads and an optional
bootstrap administrator. Safe to re-run: existing rows are left alone.

Dependencies: sqlalchemy, bcrypt, mangaverse.configs
System role: First-run data initialization

Usage:
    python -m mangaverse.boundary.db.seed --demo-ads \
        --admin-username admin --admin-email admin@example.com --admin-password '...'
"""

import argparse
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.connection import get_async_session_factory
from mangaverse.boundary.db.CRUD import ad_crud, site_setting_crud, user_crud
from mangaverse.core.security import hash_password
from mangaverse.core.site_defaults import DEFAULT_SITE_SETTINGS, DEMO_ADS

logger = logging.getLogger(__name__)


async def seed_default_settings(session: AsyncSession) -> int:
    """
    Insert default site settings whose keys are missing.

    Returns:
        int: Number of settings inserted
    """
    created = 0
    for key, value in DEFAULT_SITE_SETTINGS.items():
        if await site_setting_crud.get_by_key(session, key) is None:
            await site_setting_crud.create(session, key=key, value=value, type="string")
            created += 1
    return created


async def seed_demo_ads(session: AsyncSession) -> int:
    """Insert demo ads unless the ads table already has rows."""
    if await ad_crud.count(session) > 0:
        return 0
    for ad in DEMO_ADS:
        await ad_crud.create(session, enabled=True, **ad)
    return len(DEMO_ADS)


async def seed_admin(
    session: AsyncSession,
    username: str,
    email: str,
    password: str,
) -> bool:
    """
    Create an administrator account unless the username or email is taken.

    Returns:
        bool: True if the account was created
    """
    if await user_crud.find_conflicting(session, username, email) is not None:
        return False
    await user_crud.create(
        session,
        username=username,
        email=email,
        password_hash=hash_password(password),
        role="admin",
    )
    return True


async def run_seed(
    demo_ads: bool = False,
    admin_username: str | None = None,
    admin_email: str | None = None,
    admin_password: str | None = None,
) -> dict[str, int | bool]:
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        summary: dict[str, int | bool] = {
            "settings": await seed_default_settings(session),
            "ads": await seed_demo_ads(session) if demo_ads else 0,
            "admin": False,
        }
        if admin_username and admin_email and admin_password:
            summary["admin"] = await seed_admin(session, admin_username, admin_email, admin_password)
        await session.commit()

    logger.info("Seeding complete", extra=summary)
    return summary


def main() -> None:
    from mangaverse.configs import get_settings
    from mangaverse.observability import configure_logging

    parser = argparse.ArgumentParser(description="Seed the Mangaverse database")
    parser.add_argument("--demo-ads", action="store_true", help="Insert demo ads when none exist")
    parser.add_argument("--admin-username")
    parser.add_argument("--admin-email")
    parser.add_argument("--admin-password")
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    asyncio.run(
        run_seed(
            demo_ads=args.demo_ads,
            admin_username=args.admin_username,
            admin_email=args.admin_email,
            admin_password=args.admin_password,
        )
    )


if __name__ == "__main__":
    main()
