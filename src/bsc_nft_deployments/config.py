"""Project configuration loader for bsc-nft-deployments library."""

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from .compiler import validate_compiler_settings
from .constants import (
    DEFAULT_NETWORK,
    NETWORK_CONFIG,
    NETWORK_SELECTOR_ENV,
    OPTIMIZER_ENABLED,
    OPTIMIZER_RUNS,
    SOLIDITY_VERSION,
)
from .environment import load_environment
from .exceptions import UnknownNetworkError
from .networks import build_network, network_summary
from .types import CompilerSettings, NetworkConfiguration, ProjectConfig

logger = logging.getLogger(__name__)


def default_compiler_settings() -> CompilerSettings:
    """Compiler settings used by every profile."""
    return CompilerSettings(
        version=SOLIDITY_VERSION,
        optimizer_enabled=OPTIMIZER_ENABLED,
        optimizer_runs=OPTIMIZER_RUNS,
    )


def load_config(
    profile: Optional[str] = None,
    env_file: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProjectConfig:
    """
    Assemble the project configuration for a profile.

    The result depends only on the literals in constants and the environment,
    so loading twice with the same inputs yields equal records.

    Args:
        profile: Network name to select (defaults to $DEPLOY_NETWORK, then "hardhat")
        env_file: .env file to merge under the process environment (defaults to ./.env)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ProjectConfig with compiler settings and every declared network

    Raises:
        UnknownNetworkError: If the selected profile is not declared
        UnsupportedCompilerVersionError: If the compiler version is not supported
        EnvironmentFileNotFoundError: If env_file was given and does not exist
    """
    env = load_environment(env_file, environ)

    if profile is None:
        profile = env.get(NETWORK_SELECTOR_ENV) or DEFAULT_NETWORK

    if profile not in NETWORK_CONFIG:
        raise UnknownNetworkError(
            f"Unknown profile '{profile}' (available: {', '.join(sorted(NETWORK_CONFIG))})"
        )

    compiler = validate_compiler_settings(default_compiler_settings())

    networks: Dict[str, NetworkConfiguration] = {
        name: build_network(name, env) for name in NETWORK_CONFIG
    }

    selected = networks[profile]
    if not selected.is_local:
        if selected.url is None:
            logger.warning("Network '%s': $%s is not set", profile, selected.url_env)
        if not selected.accounts:
            logger.warning("Network '%s': $%s is not set", profile, selected.accounts_env)

    logger.debug("Loaded profile '%s': %s", profile, network_summary(selected))

    return ProjectConfig(
        compiler=compiler,
        networks=networks,
        default_network=profile,
    )
