from pydantic.dataclasses import dataclass

from service_tagger.models.microservice import ServiceDefinition

@dataclass(frozen=True)
class ServicesFile:
    services: list[ServiceDefinition]
    prefix: str = "service"
