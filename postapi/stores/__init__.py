"""Persistence adapters, one per entity type."""

from postapi.stores.posts import PostStore, SqlPostStore
from postapi.stores.users import SqlUserStore, UserStore

__all__ = [
    "UserStore",
    "SqlUserStore",
    "PostStore",
    "SqlPostStore",
]
