import json
import re
from abc import ABC, abstractmethod
from typing import override


class VersionParser(ABC):
    name: str = ""

    @abstractmethod
    def parse(self, text: str) -> str:
        ...


class JsonVersionParser(VersionParser):
    name = "json"

    @override
    def parse(self, text: str) -> str:
        try:
            document = json.loads(text)
        except ValueError:
            return ""
        if not isinstance(document, dict):
            return ""
        version = document.get("version")
        return version if isinstance(version, str) else ""


class PatternVersionParser(VersionParser):
    name = "pattern"
    TOKEN = re.compile(r'"(?:[^"\\]|\\.)*"|[{}\[\]]')
    VERSION_VALUE = re.compile(r'\s*:\s*"([^"]*)"')

    @override
    def parse(self, text: str) -> str:
        # only a "version" key of the outermost object counts
        depth = 0
        for token in self.TOKEN.finditer(text):
            value = token.group()
            if value in "{[":
                depth += 1
            elif value in "}]":
                depth -= 1
            elif depth == 1 and value == '"version"':
                match = self.VERSION_VALUE.match(text, token.end())
                if match:
                    return match.group(1)
        return ""


PARSERS: dict[str, type[VersionParser]] = {
    JsonVersionParser.name: JsonVersionParser,
    PatternVersionParser.name: PatternVersionParser,
}


def get_version_parser(name: str = JsonVersionParser.name) -> VersionParser:
    try:
        return PARSERS[name.strip().lower()]()
    except KeyError:
        raise ValueError(f"Unknown metadata parser '{name}', expected one of: {', '.join(PARSERS)}") from None
