"""FastAPI dependency injection — metadata store."""
from __future__ import annotations

from phonecheck.metadata.store import MetadataStore, get_metadata_store


def get_store() -> MetadataStore:
    """Return the process-wide metadata store (loaded once, read-only)."""
    return get_metadata_store()
