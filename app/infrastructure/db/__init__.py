"""
Database infrastructure for the Vhara Bari API.
"""

from .database import create_client, build_repositories, ping, get_repositories

__all__ = [
    "create_client",
    "build_repositories",
    "ping",
    "get_repositories",
]
