"""
Data access for the navigation menu.

Every function takes the database handle explicitly; the caller owns it.
"""

from typing import List
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.asynchronous.database import AsyncDatabase
from models.menu import MenuLink, NewMenuLink
from settings import logger

COLLECTION_NAME = "menuLinks"


class InvalidLinkId(ValueError):
    """Raised when a link identifier is not a valid ObjectId string."""

    def __init__(self, link_id: str):
        super().__init__(f"Invalid menu link id: {link_id!r}")
        self.link_id = link_id


def parse_link_id(link_id: str) -> ObjectId:
    # ObjectId(None) would mint a fresh id instead of failing
    if not isinstance(link_id, str):
        raise InvalidLinkId(link_id)
    try:
        return ObjectId(link_id)
    except InvalidId as e:
        raise InvalidLinkId(link_id) from e


async def list_links(db: AsyncDatabase) -> List[MenuLink]:
    """Return every menu link, lightest weight first."""
    cursor = db[COLLECTION_NAME].find({}, sort=[("weight", ASCENDING)])
    documents = await cursor.to_list(length=None)
    return [MenuLink.from_document(document) for document in documents]


async def add_link(db: AsyncDatabase, new_link: NewMenuLink) -> MenuLink:
    """Insert a menu link and return it with its generated id."""
    document = new_link.to_document()
    result = await db[COLLECTION_NAME].insert_one(document)
    link = MenuLink(id=str(result.inserted_id), **new_link.model_dump())
    logger.info(f"Added {link.model_dump()} to {COLLECTION_NAME}", extra={
        "link_id": link.id
    })
    return link


async def delete_link(db: AsyncDatabase, link_id: str) -> int:
    """Delete at most one menu link; unmatched ids are a no-op.

    Returns the number of deleted documents (0 or 1).
    """
    object_id = parse_link_id(link_id)
    result = await db[COLLECTION_NAME].delete_one({"_id": object_id})

    if result.deleted_count == 1:
        logger.info("Link successfully deleted", extra={"link_id": link_id})
    else:
        logger.debug("No link matched delete request", extra={"link_id": link_id})

    return result.deleted_count
