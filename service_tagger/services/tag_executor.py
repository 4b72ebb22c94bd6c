import logging
import os
import shlex

from service_tagger.clients.git_client import GitClient, GitCommandError
from service_tagger.models import ExecutionResult, Microservice, Outcome
from service_tagger.utils.logging import setup_logger

DIRECTORY_NOT_FOUND = "Directory not found"


class TagExecutor:
    def __init__(self, git: GitClient | None = None, remote: str = "origin"):
        self.git: GitClient = git or GitClient()
        self.remote: str = remote
        self.logger: logging.Logger = setup_logger("TagExecutor")

    def refresh_tags(self, services: list[Microservice]) -> None:
        for service in services:
            if not os.path.isdir(service.directory):
                continue
            try:
                self.git.fetch_tags(service.directory)
            except GitCommandError as e:
                self.logger.warning(f"Could not fetch tags for {service.name}: {e}")

    def execute(self, service: Microservice, version: str, message: str, dry_run: bool) -> ExecutionResult:
        if not os.path.isdir(service.directory):
            self.logger.error(f"Directory {service.directory} not found")
            return ExecutionResult(outcome=Outcome.FAILED, detail=DIRECTORY_NOT_FOUND)

        if dry_run:
            commands = [
                shlex.join(["git", "tag", "-a", version, "-m", message]),
                shlex.join(["git", "push", self.remote, version]),
            ]
            self.logger.info(f"Dry run mode. tag {version} in {service.directory} has not been created")
            return ExecutionResult(outcome=Outcome.DRY_RUN, detail="\n".join(f"[DRY-RUN] Would run: {c}" for c in commands))

        try:
            self.git.create_tag(service.directory, version, message)
            self.git.push_tag(service.directory, self.remote, version)
        except GitCommandError as e:
            self.logger.error(f"Failed to tag {service.name} with {version}: {e}")
            return ExecutionResult(outcome=Outcome.FAILED, detail=str(e))

        self.logger.info(f"Created tag {version} on {service.name} and pushed it to {self.remote}")
        return ExecutionResult(outcome=Outcome.SUCCESS, detail=f"Tagged and pushed {service.label} ({version})")
