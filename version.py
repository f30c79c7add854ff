"""
Version management for the request trace logger.

The version comes from pyproject.toml next to this module and the git hash
from the working tree. Either falls back to 'unknown'.
"""

import subprocess
import tomllib
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent


def _read_project_version() -> str:
    try:
        with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
            data = tomllib.load(f)
        return data.get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        return "unknown"


def _read_git_hash() -> str:
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
            check=True,
            cwd=PROJECT_ROOT,
        )
    except (OSError, subprocess.SubprocessError):
        return "unknown"
    return result.stdout.strip() or "unknown"


def get_version_info() -> tuple[str, str]:
    """Get version and git hash information.

    Returns:
        tuple: (version: str, git_hash: str)
    """
    return _read_project_version(), _read_git_hash()


def get_version() -> str:
    """Get version string.

    Returns:
        str: Version string or 'unknown' if not found
    """
    return _read_project_version()


def get_version_string() -> str:
    """Get full version string with git hash.

    Returns:
        str: Version string in format 'version (git: hash)'
    """
    version, git_hash = get_version_info()
    return f"{version} (git: {git_hash})"
