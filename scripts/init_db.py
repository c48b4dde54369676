#!/usr/bin/env python3
"""
Create the database schema and seed starter data.

Creates every table registered with SQLModel.metadata, then (unless
--schema-only) adds:
- an admin account
- a standard user
- a pending suggestion from the standard user
- an active comment from the standard user

Seeding is idempotent: accounts are looked up by email and nothing is added
twice.

Usage:
    # Create tables and seed
    uv run python scripts/init_db.py

    # Create tables only
    uv run python scripts/init_db.py --schema-only
"""

import argparse
import asyncio
import os

from sqlmodel import SQLModel

import app.models  # noqa: F401  (registers tables)
from app.config import UserRole, UserStatus
from app.core.database import engine, get_async_session
from app.core.logging import configure_logging, get_logger
from app.services import comments as comments_service
from app.services import suggestions as suggestions_service
from app.services import users as users_service

logger = get_logger(__name__)

SEED_WORD_ID = "seed-word"


async def create_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("schema_created", tables=sorted(SQLModel.metadata.tables))


async def seed() -> None:
    admin_email = os.getenv("SEED_ADMIN_EMAIL", "admin@example.com")
    admin_password = os.getenv("SEED_ADMIN_PASSWORD", "admin-password")

    async with get_async_session() as db:
        if await users_service.get_user_by_email(db, admin_email) is None:
            admin = await users_service.create_or_update_user(
                db,
                {
                    "username": "AdminSystem",
                    "email": admin_email,
                    "password": admin_password,
                    "role": UserRole.ADMIN,
                    "status": UserStatus.ACTIVE,
                },
            )
            logger.info("seed_admin_created", target_user_id=admin.id)

        user = await users_service.get_user_by_email(db, "jean@example.com")
        if user is None:
            user = await users_service.create_or_update_user(
                db,
                {
                    "username": "JeanUser",
                    "first_name": "Jean",
                    "city": "Paris",
                    "email": "jean@example.com",
                    "password": "user-password",
                    "role": UserRole.USER,
                    "status": UserStatus.ACTIVE,
                },
            )

            await suggestions_service.create_suggestion(
                db,
                user.id,
                "Wesh",
                "Popular greeting, roughly 'hey' or 'what's up'",
                example="Wesh, ça va ?",
            )
            await comments_service.create_comment(
                db, user.id, SEED_WORD_ID, "Great definition, thanks!"
            )
            logger.info("seed_user_created", target_user_id=user.id)

        await db.commit()


async def main(schema_only: bool) -> None:
    configure_logging()
    await create_schema()
    if not schema_only:
        await seed()
    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and seed starter data")
    parser.add_argument("--schema-only", action="store_true", help="Create tables without seeding")
    args = parser.parse_args()

    asyncio.run(main(args.schema_only))
