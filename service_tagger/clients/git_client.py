import subprocess
import logging

logger = logging.getLogger(__name__)


class GitCommandError(RuntimeError):
    def __init__(self, args: list[str], returncode: int, output: str):
        self.command = " ".join(args)
        self.returncode = returncode
        self.output = output
        super().__init__(output or f"{self.command} exited with code {returncode}")


class GitClient:
    def __init__(self, executable: str = "git"):
        self.executable: str = executable

    def fetch_tags(self, repo_dir: str) -> None:
        self._run(repo_dir, ["fetch", "--tags", "--quiet"])

    def create_tag(self, repo_dir: str, tag: str, message: str) -> None:
        self._run(repo_dir, ["tag", "-a", tag, "-m", message])

    def push_tag(self, repo_dir: str, remote: str, tag: str) -> None:
        self._run(repo_dir, ["push", remote, tag])

    def _run(self, repo_dir: str, args: list[str]) -> str:
        cmd = [self.executable, *args]
        try:
            result = subprocess.run(cmd, cwd=repo_dir, check=False, capture_output=True, text=True)
        except OSError as e:
            raise GitCommandError(cmd, -1, str(e)) from e
        if result.returncode != 0:
            output = (result.stderr or result.stdout or "").strip()
            logger.error(f"git {' '.join(args)} failed in {repo_dir} with code {result.returncode}")
            raise GitCommandError(cmd, result.returncode, output)
        return (result.stdout or "").strip()
