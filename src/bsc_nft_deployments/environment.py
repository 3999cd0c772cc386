"""Process environment loading for bsc-nft-deployments library."""

import logging
import os
import re
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from .exceptions import EnvironmentFileNotFoundError
from .paths import resolve_env_file

logger = logging.getLogger(__name__)

_VARIABLE_RE = re.compile(r"\$\{(?P<name>[^}:]+)(?::-(?P<default>[^}]*))?\}")


def load_environment(
    env_file: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Merge .env file values with the process environment.

    The .env file is parsed without touching os.environ. Process values take
    precedence over file values, matching python-dotenv's default
    (override=False). ${VAR} and ${VAR:-default} references in file values
    are expanded from the merged mapping only, so the result depends on
    environ and the file alone.

    Args:
        env_file: Path to a .env file (defaults to ./.env, which may be absent)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        New dictionary of variable name -> value

    Raises:
        EnvironmentFileNotFoundError: If env_file was given explicitly and does not exist
    """
    path = resolve_env_file(env_file)

    file_values: Dict[str, str] = {}
    if path.is_file():
        # Expansion is done below against the caller's mapping, not os.environ;
        # dotenv_values yields None for bare keys without "="
        file_values = {
            key: value
            for key, value in dotenv_values(path, interpolate=False).items()
            if value is not None
        }
        logger.debug("Loaded %d variables from %s", len(file_values), path)
    elif env_file is not None:
        raise EnvironmentFileNotFoundError(f".env file not found: {path}")

    if environ is None:
        environ = os.environ

    merged = dict(file_values)
    merged.update(environ)

    for key, value in file_values.items():
        if key not in environ:
            merged[key] = _expand(value, merged)

    return merged


def _expand(value: str, env: Mapping[str, str]) -> str:
    """Expand ${VAR} and ${VAR:-default} references from env."""

    def replace(match: "re.Match[str]") -> str:
        found = env.get(match.group("name"))
        if found:
            return found
        return match.group("default") or ""

    return _VARIABLE_RE.sub(replace, value)
