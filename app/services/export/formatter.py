import json
from datetime import datetime, timezone
from typing import Any

from app.models.schemas import CipherType, Direction, ExportFormat, OperationRecord

APP_NAME = "CodeCipher Utility"


class ExportFormatter:
    """
    Serializes an operation record for sharing.

    Consumes engine output only: the record is built by the history store
    from a successful transform.
    """

    def __init__(self, include_metadata: bool = True):
        self.include_metadata = include_metadata

    def export(self, record: OperationRecord, export_format: ExportFormat) -> str:
        """
        Render a record in the requested format.

        Args:
            record: The operation to export
            export_format: Plain text or JSON

        Returns:
            The rendered document
        """
        if export_format == ExportFormat.JSON:
            return self.to_json(record)
        return self.to_plain_text(record)

    def to_plain_text(self, record: OperationRecord) -> str:
        """Human readable export."""
        lines = [
            "CodeCipher Export",
            "=================",
            "",
            f"Cipher: {CipherType(record.cipher_type).display_name}",
            f"Operation: {self._operation_label(record.direction).title()}",
            "",
            "Input:",
            record.input_text,
            "",
            "Output:",
            record.output_text,
        ]

        if self.include_metadata:
            lines.extend(["", "", f"Timestamp: {self._format_timestamp(record.created_at)}"])

        return "\n".join(lines)

    def to_json(self, record: OperationRecord) -> str:
        """Structured export, pretty printed."""
        data: dict[str, Any] = {
            "cipher": CipherType(record.cipher_type).display_name,
            "operation": self._operation_label(record.direction),
            "input": record.input_text,
            "output": record.output_text,
            "timestamp": self._as_utc(record.created_at).isoformat(),
            "app": APP_NAME,
        }

        if self.include_metadata:
            data["parameters"] = record.parameters
            data["metadata"] = record.details

        return json.dumps(data, indent=2, ensure_ascii=False)

    @staticmethod
    def _operation_label(direction: Direction | str) -> str:
        return Direction(direction).value

    @staticmethod
    def _as_utc(timestamp: datetime) -> datetime:
        # SQLite hands back naive datetimes that were stored as UTC
        if timestamp.tzinfo is None:
            return timestamp.replace(tzinfo=timezone.utc)
        return timestamp.astimezone(timezone.utc)

    def _format_timestamp(self, timestamp: datetime) -> str:
        return self._as_utc(timestamp).strftime("%A, %B %d, %Y at %H:%M:%S %Z")
