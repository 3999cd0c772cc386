"""Path management utilities for bsc-nft-deployments library."""

from pathlib import Path
from typing import Optional, Union


def get_default_env_file() -> Path:
    """
    Get default .env file location (current working directory).

    Returns:
        Path to ./.env
    """
    return Path.cwd() / ".env"


def resolve_env_file(env_file: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve the .env file path.

    Args:
        env_file: Custom .env path (defaults to ./.env)

    Returns:
        Absolute path to the .env file (which may not exist)
    """
    if env_file is None:
        return get_default_env_file()
    return Path(env_file).expanduser().absolute()
