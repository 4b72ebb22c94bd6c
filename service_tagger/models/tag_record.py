from enum import Enum

from pydantic.dataclasses import dataclass


class Outcome(str, Enum):
    SUCCESS = "SUCCESS"
    DRY_RUN = "DRY-RUN"
    SKIPPED = "SKIPPED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class TagRecord:
    service: str
    version: str
    message: str
    outcome: Outcome
    reason: str = ""

    @property
    def status(self) -> str:
        if self.outcome is Outcome.FAILED and self.reason:
            return f"{self.outcome.value}: {self.reason}"
        return self.outcome.value
