import logging
import os
import re

from service_tagger.models import Microservice, ServiceKind
from service_tagger.utils.logging import setup_logger
from service_tagger.utils.version_parsers import JsonVersionParser, VersionParser

PACKAGE_JSON = "package.json"
BACKEND_PROPERTIES_PATHS = (
    "{name}-app/src/main/resources/application.properties",
    "src/main/resources/application.properties",
)
APP_VERSION_LINE = re.compile(r"^app\.version=")


class VersionExtractor:
    def __init__(self, parser: VersionParser | None = None):
        self.parser: VersionParser = parser or JsonVersionParser()
        self.logger: logging.Logger = setup_logger("VersionExtractor")

    def extract(self, service: Microservice) -> str:
        """Return the version declared in the service's metadata, or "" when none can be read."""
        if service.kind == ServiceKind.FRONTEND:
            return self._from_package_json(service)
        return self._from_properties(service)

    def candidate_paths(self, service: Microservice) -> list[str]:
        if service.metadata_paths:
            templates = service.metadata_paths
        elif service.kind == ServiceKind.FRONTEND:
            templates = (PACKAGE_JSON,)
        else:
            templates = BACKEND_PROPERTIES_PATHS
        return [os.path.join(service.directory, t.format(name=service.name)) for t in templates]

    def _from_package_json(self, service: Microservice) -> str:
        path = next((p for p in self.candidate_paths(service) if os.path.isfile(p)), None)
        if path is None:
            self.logger.debug(f"No package.json found for {service.name}")
            return ""
        text = self._read(path)
        return self.parser.parse(text) if text is not None else ""

    def _from_properties(self, service: Microservice) -> str:
        # the first existing file decides, even if it lacks app.version
        path = next((p for p in self.candidate_paths(service) if os.path.isfile(p)), None)
        if path is None:
            self.logger.debug(f"No application.properties found for {service.name}")
            return ""
        text = self._read(path)
        if text is None:
            return ""
        for line in text.splitlines():
            if APP_VERSION_LINE.match(line):
                return line.split("=")[1].strip()
        return ""

    def _read(self, path: str) -> str | None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Could not read {path}: {e}")
            return None
