import re

SEMVER_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")


def is_valid(version: str) -> bool:
    """Check for a plain MAJOR.MINOR.PATCH version (no 'v' prefix, no pre-release or build suffix)."""
    if not isinstance(version, str):
        return False
    return SEMVER_PATTERN.fullmatch(version) is not None
