from enum import Enum

from pydantic import field_validator
from pydantic.dataclasses import dataclass


class ServiceKind(str, Enum):
    BACKEND = "backend"
    FRONTEND = "frontend"


@dataclass(frozen=True)
class ServiceDefinition:
    name: str
    kind: ServiceKind
    metadata_paths: tuple[str, ...] = ()

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value or "," in value:
            raise ValueError("service name must be non-empty and must not contain ','")
        return value


@dataclass(frozen=True)
class Microservice:
    name: str
    kind: ServiceKind
    directory: str
    metadata_paths: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.name.upper()
