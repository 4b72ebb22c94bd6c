from datetime import datetime

from pydantic.dataclasses import dataclass

DATE_FORMAT = "%d-%b-%Y"
TIME_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class AuditEntry:
    service: str
    version: str
    status: str
    timestamp: datetime

    def render(self) -> str:
        stamp = f"{self.timestamp.strftime(DATE_FORMAT)} {self.timestamp.strftime(TIME_FORMAT)}"
        return f"{self.service.upper()} - {self.version} - {stamp} - {self.status}"
