"""
Shared fixtures for the tagging tests.
"""
import json
import os

import pytest

from service_tagger.models import Microservice, ServiceKind
from service_tagger.utils.prompter import Prompter


class ScriptedPrompter(Prompter):
    """Answers prompts from a fixed script and records everything shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []
        self.output = []

    def ask(self, question):
        self.questions.append(question)
        if not self.answers:
            self.closed = True
            return ""
        return self.answers.pop(0)

    def show(self, message=""):
        self.output.append(message)

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def scripted_prompter():
    return ScriptedPrompter


@pytest.fixture
def make_service(tmp_path):
    def factory(name, kind=ServiceKind.BACKEND, create=True, metadata_paths=()):
        directory = tmp_path / f"service-{name}"
        if create:
            directory.mkdir(exist_ok=True)
        return Microservice(name=name, kind=kind, directory=str(directory), metadata_paths=metadata_paths)
    return factory


@pytest.fixture
def write_properties():
    def writer(directory, relative_path, content):
        path = os.path.join(directory, relative_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path
    return writer


@pytest.fixture
def write_package_json():
    def writer(directory, document):
        path = os.path.join(directory, "package.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write(document if isinstance(document, str) else json.dumps(document, indent=2))
        return path
    return writer
