"""
Persistence store for survey records.

One async contract (SurveyStore) over two interchangeable backends:
- LocalJsonStore: a single JSON file on disk
- RemoteHttpStore: a remote collection endpoint
"""

from tickettrack.store.base import SurveyStore
from tickettrack.store.errors import (
    StoreError,
    StoreConnectionError,
    StoreWriteError,
    UnsupportedOperationError,
)
from tickettrack.store.factory import create_store
from tickettrack.store.local import LocalJsonStore
from tickettrack.store.remote import RemoteHttpStore

__all__ = [
    "SurveyStore",
    "LocalJsonStore",
    "RemoteHttpStore",
    "create_store",
    "StoreError",
    "StoreConnectionError",
    "StoreWriteError",
    "UnsupportedOperationError",
]
