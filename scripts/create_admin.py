"""
Provision an admin account

Usage:
    python scripts/create_admin.py <email> <password>
"""

import asyncio
import os
import sys

from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import config  # noqa: E402
from app.core.errors import ErrorResponse  # noqa: E402
from app.core.security import hash_password  # noqa: E402
from app.db.mongodb import ADMINS_COLLECTION, MongoConnectionManager  # noqa: E402
from app.repositories.admin import AdminRepository  # noqa: E402


async def create_admin(email: str, password: str) -> int:
    manager = MongoConnectionManager(config)
    try:
        database = await manager.ensure_connected()
        print("Connected to MongoDB")

        repository = AdminRepository(database[ADMINS_COLLECTION])
        if await repository.get_by_email(email):
            print("Admin with this email already exists.")
            return 1

        admin = await repository.create(email, hash_password(password))
        print("Admin created successfully:")
        print({"id": admin.id, "email": admin.email})
        return 0
    except ErrorResponse as e:
        print(f"Error creating admin: {e.message}")
        return 1
    finally:
        manager.close()


def main() -> int:
    if len(sys.argv) != 3 or not sys.argv[1].strip() or not sys.argv[2]:
        print("Usage: python scripts/create_admin.py <email> <password>")
        return 1
    return asyncio.run(create_admin(sys.argv[1], sys.argv[2]))


if __name__ == "__main__":
    sys.exit(main())
