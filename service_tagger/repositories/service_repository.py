import os
from collections import Counter
from importlib import resources
from importlib.resources.abc import Traversable

from ruamel.yaml import YAML
from service_tagger.models import Microservice, ServicesFile
from service_tagger.utils.yaml_loader import get_yaml_instance

BUNDLED_SERVICES_FILE = "services.yaml"


def bundled_services_file() -> Traversable:
    return resources.files("service_tagger.repositories").joinpath(BUNDLED_SERVICES_FILE)


class ServiceRepository:
    def __init__(self, file_path: str, root_dir: str = ".", required: bool = False):
        self.file_path: str = file_path
        self.root_dir: str = root_dir
        self.required: bool = required
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[Microservice]:
        if not os.path.isfile(self.file_path):
            if self.required:
                raise FileNotFoundError(f"Services file {self.file_path} not found")
            return []
        with open(self.file_path, "r", encoding="utf-8") as f:
            data = self.yaml.load(f)
            try:
                parsed = ServicesFile(**data)
            except Exception as e:
                raise ValueError(f"Invalid services.yaml structure: {e}") from e

        duplicates = [name for name, count in Counter(d.name for d in parsed.services).items() if count > 1]
        if duplicates:
            raise ValueError(f"Invalid services.yaml structure: duplicate services {', '.join(duplicates)}")

        return [
            Microservice(
                name=definition.name,
                kind=definition.kind,
                directory=os.path.join(self.root_dir, f"{parsed.prefix}-{definition.name}"),
                metadata_paths=definition.metadata_paths,
            )
            for definition in parsed.services
        ]
