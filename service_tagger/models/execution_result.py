from pydantic.dataclasses import dataclass

from service_tagger.models.tag_record import Outcome

@dataclass(frozen=True)
class ExecutionResult:
    outcome: Outcome
    detail: str = ""
