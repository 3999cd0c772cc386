"""Compiler settings validation for bsc-nft-deployments library."""

from typing import Any, Dict, Iterable, Optional

from .constants import KNOWN_SOLC_VERSIONS
from .exceptions import InvalidCompilerSettingsError, UnsupportedCompilerVersionError
from .types import CompilerSettings


def validate_compiler_settings(
    settings: CompilerSettings, supported: Optional[Iterable[str]] = None
) -> CompilerSettings:
    """
    Check solc version and optimizer settings.

    Args:
        settings: Compiler settings to validate
        supported: Accepted solc versions (defaults to KNOWN_SOLC_VERSIONS, a
                   static table that ends at 0.8.30; pass fetch_solc_releases()
                   output to accept newer upstream releases)

    Returns:
        The same settings

    Raises:
        UnsupportedCompilerVersionError: If the version is not a supported release
        InvalidCompilerSettingsError: If the run count is not a non-negative integer
    """
    supported_versions = KNOWN_SOLC_VERSIONS if supported is None else frozenset(supported)

    if settings.version not in supported_versions:
        raise UnsupportedCompilerVersionError(
            f"Unsupported solc version '{settings.version}'"
        )

    runs = settings.optimizer_runs
    # bool is an int subclass; reject it explicitly
    if isinstance(runs, bool) or not isinstance(runs, int):
        raise InvalidCompilerSettingsError(
            f"Optimizer runs must be an integer (got {runs!r})"
        )
    if runs < 0:
        raise InvalidCompilerSettingsError(
            f"Optimizer runs must be non-negative (got {runs})"
        )

    if not isinstance(settings.optimizer_enabled, bool):
        raise InvalidCompilerSettingsError(
            f"Optimizer enabled flag must be a bool (got {settings.optimizer_enabled!r})"
        )

    return settings


def to_solc_settings(settings: CompilerSettings) -> Dict[str, Any]:
    """
    Render the solc standard-JSON "settings" fragment.

    Returns:
        {"optimizer": {"enabled": bool, "runs": int}}
    """
    return {
        "optimizer": {
            "enabled": settings.optimizer_enabled,
            "runs": settings.optimizer_runs,
        }
    }
