"""Operation export."""

from app.services.export.formatter import ExportFormatter

__all__ = ["ExportFormatter"]
