#!/usr/bin/env python3
"""
Management commands for the menu site.

Usage:
    python manage.py init_db
    python manage.py check_db
    python manage.py reset_db
    python manage.py list_links
    python manage.py add_link <weight> <path> <name>
    python manage.py delete_link <id>
"""

import asyncio
import sys
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from database import create_client
from helpers.menu_links import COLLECTION_NAME, InvalidLinkId, add_link, delete_link, list_links
from models.menu import MAX_WEIGHT, MIN_WEIGHT, NewMenuLink
from settings import settings, logger


async def init_db():
    """Create the weight index used for menu ordering."""
    client = create_client(settings)
    try:
        db = client[settings.database_name]
        index_name = await db[COLLECTION_NAME].create_index([("weight", ASCENDING)])
        logger.info(f"Index '{index_name}' ready on {COLLECTION_NAME}")
    finally:
        await client.close()


async def check_db():
    """Check database connection and collections."""
    client = create_client(settings)
    try:
        await client.admin.command("ping")
        names = await client[settings.database_name].list_collection_names()
        logger.info(f"Database connected. Found {len(names)} collections: {names}")
    except PyMongoError as e:
        logger.error(f"Database connection failed: {e}")
        sys.exit(1)
    finally:
        await client.close()


async def reset_db():
    """Drop the menu links collection."""
    client = create_client(settings)
    try:
        logger.warning(f"Dropping collection {COLLECTION_NAME}...")
        await client[settings.database_name].drop_collection(COLLECTION_NAME)
        logger.info("Database reset successfully")
    finally:
        await client.close()


async def print_links():
    """Print the menu in display order."""
    client = create_client(settings)
    try:
        for link in await list_links(client[settings.database_name]):
            print(f"{link.weight:>5}  {link.id}  {link.path}  {link.name}")
    finally:
        await client.close()


async def create_link(weight: int, path: str, name: str):
    """Insert one menu link."""
    client = create_client(settings)
    try:
        link = await add_link(client[settings.database_name], NewMenuLink(weight=weight, path=path, name=name))
        print(link.id)
    finally:
        await client.close()


async def remove_link(link_id: str):
    """Delete one menu link by id."""
    client = create_client(settings)
    try:
        deleted = await delete_link(client[settings.database_name], link_id)
        if not deleted:
            logger.warning(f"No menu link with id {link_id}")
    except InvalidLinkId as e:
        logger.error(str(e))
        sys.exit(1)
    finally:
        await client.close()


def usage():
    print("Usage: python manage.py <command> [args]")
    print("Commands:")
    print("  init_db                          - Create the weight index")
    print("  check_db                         - Check database connection")
    print("  reset_db                         - Drop the menu links collection")
    print("  list_links                       - Print the menu in display order")
    print("  add_link <weight> <path> <name>  - Add a menu link")
    print("  delete_link <id>                 - Delete a menu link")


def main():
    if len(sys.argv) < 2:
        usage()
        sys.exit(1)

    command = sys.argv[1]

    if command == "init_db":
        asyncio.run(init_db())
    elif command == "check_db":
        asyncio.run(check_db())
    elif command == "reset_db":
        asyncio.run(reset_db())
    elif command == "list_links":
        asyncio.run(print_links())
    elif command == "add_link":
        if len(sys.argv) != 5:
            print("Usage: python manage.py add_link <weight> <path> <name>")
            sys.exit(1)
        try:
            weight = int(sys.argv[2])
        except ValueError:
            print(f"Weight must be an integer, got {sys.argv[2]!r}")
            sys.exit(1)
        if not MIN_WEIGHT <= weight <= MAX_WEIGHT:
            print(f"Weight must fit in a signed 64-bit integer, got {weight}")
            sys.exit(1)
        asyncio.run(create_link(weight, sys.argv[3], sys.argv[4]))
    elif command == "delete_link":
        if len(sys.argv) != 3:
            print("Usage: python manage.py delete_link <id>")
            sys.exit(1)
        asyncio.run(remove_link(sys.argv[2]))
    else:
        print(f"Unknown command: {command}")
        print("Run 'python manage.py' to see available commands")
        sys.exit(1)


if __name__ == "__main__":
    main()
