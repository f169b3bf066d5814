"""Reference library."""

from app.services.reference.entries import REFERENCE_ENTRIES, ReferenceEntry, get_entries

__all__ = ["REFERENCE_ENTRIES", "ReferenceEntry", "get_entries"]
