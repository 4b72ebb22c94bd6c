import os
from datetime import datetime

from service_tagger.models import AuditEntry
from service_tagger.models.audit_entry import DATE_FORMAT, TIME_FORMAT


class AuditLogError(RuntimeError):
    pass


class AuditLogRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path

    def start_session(self, timestamp: datetime) -> None:
        self._write_line(
            f"==== Tagging session on {timestamp.strftime(DATE_FORMAT)} {timestamp.strftime(TIME_FORMAT)} ===="
        )

    def append(self, entry: AuditEntry) -> None:
        self._write_line(entry.render())

    def _write_line(self, line: str) -> None:
        try:
            parent = os.path.dirname(self.file_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.file_path, "a", encoding="utf-8") as f:
                f.write(f"{line}\n")
        except OSError as e:
            raise AuditLogError(f"Error writing audit log {self.file_path}: {e}") from e
