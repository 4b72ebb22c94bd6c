from .audit_entry import AuditEntry
from .execution_result import ExecutionResult
from .microservice import Microservice, ServiceDefinition, ServiceKind
from .tag_record import Outcome, TagRecord
from .tag_state import TagState, TRANSITIONS, TERMINAL_STATES, InvalidTransitionError
from .wrappers import ServicesFile

__all__ = [
    "AuditEntry",
    "ExecutionResult",
    "Microservice",
    "ServiceDefinition",
    "ServiceKind",
    "Outcome",
    "TagRecord",
    "TagState",
    "TRANSITIONS",
    "TERMINAL_STATES",
    "InvalidTransitionError",
    "ServicesFile",
]
