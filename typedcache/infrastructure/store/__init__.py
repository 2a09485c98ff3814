"""Durable value store implementations."""

from typedcache.infrastructure.store.disk_store import DiskValueStore

__all__ = ["DiskValueStore"]
