"""
Database configuration and client management.
"""

import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.server_api import ServerApi

from app.config import Settings
from app.domain.repositories import Repositories
from app.infrastructure.repositories.mongo_repository import (
    MongoDocumentRepository,
    MongoUserRepository,
)

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
HOUSES_COLLECTION = "houses"
TESTIMONIALS_COLLECTION = "testimonials"
AGENTS_COLLECTION = "agents"
PAYMENTS_COLLECTION = "payments"
RENTED_HOUSES_COLLECTION = "rentedhouses"


def create_client(settings: Settings) -> AsyncMongoClient:
    """
    Create the process-wide MongoDB client with the Stable API pinned to v1.
    """
    return AsyncMongoClient(
        settings.mongo_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


def build_repositories(client: AsyncMongoClient, database_name: str) -> Repositories:
    """
    Bind one repository to each collection of the database.
    """
    db = client[database_name]
    return Repositories(
        users=MongoUserRepository(db[USERS_COLLECTION]),
        houses=MongoDocumentRepository(db[HOUSES_COLLECTION]),
        testimonials=MongoDocumentRepository(db[TESTIMONIALS_COLLECTION]),
        agents=MongoDocumentRepository(db[AGENTS_COLLECTION]),
        payments=MongoDocumentRepository(db[PAYMENTS_COLLECTION]),
        rented_houses=MongoDocumentRepository(db[RENTED_HOUSES_COLLECTION]),
    )


async def ping(client: AsyncMongoClient) -> None:
    """Send a ping to confirm a successful connection."""
    await client.admin.command("ping")
    logger.info("Pinged your deployment. You successfully connected to MongoDB!")


def get_repositories(request: Request) -> Repositories:
    """
    Dependency function to get the repositories bound at startup.
    """
    return request.app.state.repositories
