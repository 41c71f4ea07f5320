"""
Environment + project-root helpers.

The CLI, the API server and the test suite can all be started from different
working directories. This module keeps `.env` loading and relative-path handling
(e.g. `--points-file data/points.json`) consistent between them:
- `load_dotenv_if_present()`: load a repo-local `.env` once, never overriding set variables
- `get_project_root()`: find the repo root (`GEOCONNECT_PROJECT_ROOT`, `.env`, `.git`, `pyproject.toml`)
- `resolve_project_path()`: resolve relative paths against the project root
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

_ROOT_MARKERS = (".env", ".git", "pyproject.toml")


def _find_marked_parent(start: Path) -> Path | None:
    start = start.resolve()
    for candidate in (start, *start.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return None


@lru_cache
def get_project_root() -> Path:
    """Return the best-guess project root directory (cached)."""
    override = os.getenv("GEOCONNECT_PROJECT_ROOT")
    if override:
        return Path(override).expanduser().resolve()

    env_file = os.getenv("GEOCONNECT_ENV_FILE")
    if env_file:
        return Path(env_file).expanduser().resolve().parent

    # CWD first (running inside the repo), then the installed module location.
    for start in (Path.cwd(), Path(__file__).parent):
        found = _find_marked_parent(start)
        if found is not None:
            return found

    return Path.cwd().resolve()


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None).

    Existing process environment variables always win over `.env` values.
    """
    try:
        from dotenv import load_dotenv
    except ImportError:
        return None

    explicit = os.getenv("GEOCONNECT_ENV_FILE")
    env_path = Path(explicit).expanduser().resolve() if explicit else get_project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (get_project_root() / p).resolve()
