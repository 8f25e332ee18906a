"""Retrieve tagged bookmarks from the Pocket API."""

from .client import ClientConfig, PocketClient, Transport
from .models import Bookmark

__all__ = ["Bookmark", "ClientConfig", "PocketClient", "Transport"]
