"""Persistent store for gptchat.

Keeps the endpoint configuration and the conversation history as two
JSON documents under a per-user directory.
"""

from .models import Config, History
from .paths import StoragePaths
from .store import JsonStore

__all__ = [
    "Config",
    "History",
    "JsonStore",
    "StoragePaths",
]
