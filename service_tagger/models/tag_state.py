from enum import Enum


class TagState(Enum):
    PENDING = "pending"
    PROMPT_CONFIRM = "prompt_confirm"
    VERSION_RESOLUTION = "version_resolution"
    MESSAGE_ENTRY = "message_entry"
    PREVIEW = "preview"
    EXECUTE = "execute"
    SKIPPED_BY_FLAG = "skipped_by_flag"
    SKIPPED_DECLINED = "skipped_declined"
    CANCELLED = "cancelled"
    SUCCESS = "success"
    DRY_RUN = "dry_run"
    FAILED = "failed"


TRANSITIONS: dict[TagState, frozenset[TagState]] = {
    TagState.PENDING: frozenset({TagState.SKIPPED_BY_FLAG, TagState.PROMPT_CONFIRM}),
    TagState.PROMPT_CONFIRM: frozenset({TagState.SKIPPED_DECLINED, TagState.VERSION_RESOLUTION}),
    TagState.VERSION_RESOLUTION: frozenset({TagState.MESSAGE_ENTRY, TagState.CANCELLED}),
    TagState.MESSAGE_ENTRY: frozenset({TagState.PREVIEW}),
    TagState.PREVIEW: frozenset({TagState.EXECUTE, TagState.CANCELLED}),
    TagState.EXECUTE: frozenset({TagState.SUCCESS, TagState.DRY_RUN, TagState.FAILED}),
}

TERMINAL_STATES: frozenset[TagState] = frozenset(
    {
        TagState.SKIPPED_BY_FLAG,
        TagState.SKIPPED_DECLINED,
        TagState.CANCELLED,
        TagState.SUCCESS,
        TagState.DRY_RUN,
        TagState.FAILED,
    }
)


class InvalidTransitionError(RuntimeError):
    def __init__(self, source: TagState, target: TagState):
        super().__init__(f"Invalid tagging transition {source.name} -> {target.name}")
        self.source = source
        self.target = target
