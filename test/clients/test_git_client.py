import subprocess

import pytest
from service_tagger.clients.git_client import GitClient, GitCommandError


class DummyResult:
    def __init__(self, returncode=0, stdout="", stderr=""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


@pytest.fixture
def client():
    return GitClient()


@pytest.fixture
def recorded(monkeypatch):
    calls = []

    def fake_run(cmd, cwd=None, check=False, capture_output=False, text=False):
        calls.append((cmd, cwd))
        return DummyResult()

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls


def test_fetch_tags(client, recorded):
    client.fetch_tags("service-ui")
    assert recorded == [(["git", "fetch", "--tags", "--quiet"], "service-ui")]


def test_create_annotated_tag(client, recorded):
    client.create_tag("service-ui", "1.2.3", "[RELEASE-DEV-1.2.3-01-Jan-2025]msg")
    assert recorded == [(["git", "tag", "-a", "1.2.3", "-m", "[RELEASE-DEV-1.2.3-01-Jan-2025]msg"], "service-ui")]


def test_push_tag(client, recorded):
    client.push_tag("service-ui", "origin", "1.2.3")
    assert recorded == [(["git", "push", "origin", "1.2.3"], "service-ui")]


def test_failure_raises_with_stderr(monkeypatch, client):
    monkeypatch.setattr(
        subprocess, "run",
        lambda cmd, cwd=None, check=False, capture_output=False, text=False:
            DummyResult(128, stderr="fatal: tag '1.2.3' already exists\n"),
    )
    with pytest.raises(GitCommandError, match="fatal: tag '1.2.3' already exists") as excinfo:
        client.create_tag("service-ui", "1.2.3", "msg")
    assert excinfo.value.returncode == 128
    assert excinfo.value.command == "git tag -a 1.2.3 -m msg"


def test_failure_without_output(monkeypatch, client):
    monkeypatch.setattr(
        subprocess, "run",
        lambda cmd, cwd=None, check=False, capture_output=False, text=False: DummyResult(1),
    )
    with pytest.raises(GitCommandError, match="git push origin 1.2.3 exited with code 1"):
        client.push_tag("service-ui", "origin", "1.2.3")


def test_missing_executable(client):
    client.executable = "definitely-not-a-git-binary"
    with pytest.raises(GitCommandError):
        client.fetch_tags(".")
