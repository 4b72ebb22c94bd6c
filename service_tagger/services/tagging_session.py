import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, override

from service_tagger.models import (
    AuditEntry,
    InvalidTransitionError,
    Microservice,
    Outcome,
    TagRecord,
    TagState,
    TERMINAL_STATES,
    TRANSITIONS,
)
from service_tagger.models.audit_entry import DATE_FORMAT, TIME_FORMAT
from service_tagger.repositories import AuditLogRepository
from service_tagger.repositories.audit_log_repository import AuditLogError
from service_tagger.services.service import Service
from service_tagger.services.tag_executor import TagExecutor
from service_tagger.services.version_extractor import VersionExtractor
from service_tagger.utils.logging import setup_logger
from service_tagger.utils.prompter import Prompter, TerminalPrompter
from service_tagger.utils.semver import is_valid

MESSAGE_SAMPLE = "[FEATURE: Adding sth | PATCH: Fixing sth | UPDATE: sth version]"

OUTCOME_BY_STATE: dict[TagState, Outcome] = {
    TagState.SKIPPED_BY_FLAG: Outcome.SKIPPED,
    TagState.SKIPPED_DECLINED: Outcome.SKIPPED,
    TagState.CANCELLED: Outcome.CANCELLED,
    TagState.SUCCESS: Outcome.SUCCESS,
    TagState.DRY_RUN: Outcome.DRY_RUN,
    TagState.FAILED: Outcome.FAILED,
}
STATE_BY_OUTCOME: dict[Outcome, TagState] = {
    Outcome.SUCCESS: TagState.SUCCESS,
    Outcome.DRY_RUN: TagState.DRY_RUN,
    Outcome.FAILED: TagState.FAILED,
}


def build_tag_message(version: str, message: str, date: datetime) -> str:
    return f"[RELEASE-DEV-{version}-{date.strftime(DATE_FORMAT)}]{message}"


def render_summary(records: list[TagRecord]) -> str:
    lines = [
        "==================",
        "Summary:",
        f"{'SERVICE':<10} | {'VERSION':<10} | {'STATUS':<40}".rstrip(),
        "-" * 63,
    ]
    for record in records:
        row = f"{record.service.upper():<10} | {record.version or 'N/A':<10} | {record.status:<40}"
        lines.append(row.rstrip())
    return "\n".join(lines)


@dataclass
class TaggingContext:
    service: Microservice
    version: str = ""
    message: str = ""
    reason: str = ""


class TaggingSession(Service):
    def __init__(
        self,
        services: list[Microservice],
        audit_log_file: str,
        prompter: Prompter | None = None,
        extractor: VersionExtractor | None = None,
        executor: TagExecutor | None = None,
        dry_run: bool = False,
        skip_all: bool = False,
        skip: Iterable[str] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.services: list[Microservice] = list(services)
        self.audit_log_file: str = audit_log_file
        self.audit_log: AuditLogRepository = AuditLogRepository(audit_log_file)
        self.prompter: Prompter = prompter or TerminalPrompter()
        self.extractor: VersionExtractor = extractor or VersionExtractor()
        self.executor: TagExecutor = executor or TagExecutor()
        self.dry_run: bool = dry_run
        self.skip_all: bool = skip_all
        self.skip: frozenset[str] = frozenset(skip or ())
        self.clock: Callable[[], datetime] = clock
        self.started_at: datetime = clock()
        self.records: list[TagRecord] = []
        self.logger: logging.Logger = setup_logger("TaggingSession")
        self.handlers: dict[TagState, Callable[[TaggingContext], TagState]] = {
            TagState.PENDING: self._check_skip_list,
            TagState.PROMPT_CONFIRM: self._confirm_tagging,
            TagState.VERSION_RESOLUTION: self._resolve_version,
            TagState.MESSAGE_ENTRY: self._enter_message,
            TagState.PREVIEW: self._preview,
            TagState.EXECUTE: self._execute,
        }

    @override
    def run(self) -> list[TagRecord]:
        self._announce()
        if self.skip_all:
            self.logger.info("Skip-all requested, no service has been processed")
            return []

        unknown = sorted(self.skip - {s.name for s in self.services})
        if unknown:
            self.logger.warning(f"Ignoring unknown services in skip list: {', '.join(unknown)}")

        self.prompter.show("Fetching latest tags from remote...")
        self.executor.refresh_tags(self.services)
        self.prompter.show("Tags fetched.")
        self.prompter.show()

        try:
            self.audit_log.start_session(self.clock())
        except AuditLogError as e:
            self.logger.error(f"Audit session marker was not written: {e}")
        self.records = [self.process(service) for service in self.services]

        self.prompter.show(render_summary(self.records))
        self.prompter.show()
        self.prompter.show(f"Full audit log saved to {self.audit_log_file}")
        return self.records

    def process(self, service: Microservice) -> TagRecord:
        context = TaggingContext(service=service)
        state = TagState.PENDING
        while state not in TERMINAL_STATES:
            target = self.handlers[state](context)
            if target not in TRANSITIONS[state]:
                raise InvalidTransitionError(state, target)
            state = target
        self.prompter.show()
        return self._record(context, state)

    def _announce(self) -> None:
        self.prompter.show("=== Microservice Tagging Script ===")
        self.prompter.show(f"Date: {self.started_at.strftime(DATE_FORMAT)}")
        self.prompter.show(f"Time: {self.started_at.strftime(TIME_FORMAT)}")
        self.prompter.show(f"Audit log: {self.audit_log_file}")
        self.prompter.show()
        if self.dry_run:
            self.prompter.show("DRY-RUN MODE: No git commands will be executed.")
        if self.skip_all:
            self.prompter.show("SKIP-ALL MODE: No microservices will be processed.")
            return
        if self.skip:
            self.prompter.show(f"Skipping specific services: {' '.join(sorted(self.skip))}")
        self.prompter.show()

    def _check_skip_list(self, context: TaggingContext) -> TagState:
        if context.service.name in self.skip:
            self.prompter.show(f">> {context.service.label} - SKIPPED (via --skip)")
            return TagState.SKIPPED_BY_FLAG
        return TagState.PROMPT_CONFIRM

    def _confirm_tagging(self, context: TaggingContext) -> TagState:
        self.prompter.show(f">> {context.service.label}")
        self.prompter.show("------------------------------")
        if self.prompter.confirm(f"Do you want to tag {context.service.label}?"):
            return TagState.VERSION_RESOLUTION
        return TagState.SKIPPED_DECLINED

    def _resolve_version(self, context: TaggingContext) -> TagState:
        detected = self.extractor.extract(context.service)
        if is_valid(detected):
            self.prompter.show(f"Auto-detected version: {detected}")
        else:
            self.prompter.show("Could not auto-detect version or invalid format.")
            detected = ""

        while True:
            version = self.prompter.ask(f"Enter version [{detected}]: ") or detected
            if is_valid(version):
                context.version = version
                return TagState.MESSAGE_ENTRY
            if self.prompter.closed:
                self.prompter.show(f"Input closed, cancelling {context.service.label}.")
                return TagState.CANCELLED
            self.prompter.show("Invalid version format. Please use semantic versioning (e.g., 1.0.2)")

    def _enter_message(self, context: TaggingContext) -> TagState:
        note = self.prompter.ask(f"Enter message, Sample: {MESSAGE_SAMPLE}: ")
        context.message = build_tag_message(context.version, note, self.started_at)
        return TagState.PREVIEW

    def _preview(self, context: TaggingContext) -> TagState:
        self.prompter.show()
        self.prompter.show(f"Preview Tag for {context.service.label}:")
        self.prompter.show(f"  Version: {context.version}")
        self.prompter.show(f"  Message: {context.message}")
        if self.prompter.confirm("Confirm to push?"):
            return TagState.EXECUTE
        self.prompter.show(f"Skipped pushing {context.service.label}.")
        return TagState.CANCELLED

    def _execute(self, context: TaggingContext) -> TagState:
        try:
            result = self.executor.execute(context.service, context.version, context.message, self.dry_run)
        except Exception as e:
            self.logger.error(f"Tagging {context.service.name} failed: {e}")
            context.reason = str(e)
            return TagState.FAILED

        if result.outcome is Outcome.FAILED:
            context.reason = result.detail
            self.prompter.show(f"Failed to tag {context.service.label}: {result.detail}")
        elif result.detail:
            self.prompter.show(result.detail)
        return STATE_BY_OUTCOME[result.outcome]

    def _record(self, context: TaggingContext, state: TagState) -> TagRecord:
        record = TagRecord(
            service=context.service.name,
            version=context.version,
            message=context.message,
            outcome=OUTCOME_BY_STATE[state],
            reason=context.reason,
        )
        entry = AuditEntry(service=record.service, version=record.version, status=record.status, timestamp=self.clock())
        try:
            self.audit_log.append(entry)
        except AuditLogError as e:
            self.logger.error(f"Audit entry for {record.service} was not written: {e}")
            self.prompter.show(f"Could not write audit entry for {context.service.label}: {e}")
        return record
