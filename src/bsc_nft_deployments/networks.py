"""Network configuration assembly and validation for bsc-nft-deployments library."""

import logging
import re
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .constants import NETWORK_CONFIG, URL_SCHEMES
from .exceptions import (
    InvalidCredentialError,
    InvalidUrlError,
    MissingEnvironmentError,
    UnknownNetworkError,
)
from .types import NetworkConfiguration

logger = logging.getLogger(__name__)

_PRIVATE_KEY_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


def normalize_private_key(value: Optional[str]) -> Optional[str]:
    """
    Normalize a signing key to a single 0x prefix.

    Args:
        value: Raw key as read from the environment

    Returns:
        "0x"-prefixed key, or None if the value is absent or blank
    """
    if value is None:
        return None

    key = value.strip()
    if not key:
        return None

    # Prepend only when missing; never produce "0x0x..."
    if key[:2].lower() == "0x":
        return "0x" + key[2:]
    return "0x" + key


def _optional(environ: Mapping[str, str], name: Optional[str]) -> Optional[str]:
    """Read an environment value, treating blank strings as absent."""
    if name is None:
        return None
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def build_network(name: str, environ: Mapping[str, str]) -> NetworkConfiguration:
    """
    Assemble a NetworkConfiguration from the network table and environment.

    Absent URL or key values are recorded as absent; they are only enforced
    when a network operation is attempted (see require_remote).

    Args:
        name: Network name (e.g., "bscTestnet")
        environ: Environment mapping

    Returns:
        NetworkConfiguration record

    Raises:
        UnknownNetworkError: If name is not in the network table
    """
    if name not in NETWORK_CONFIG:
        raise UnknownNetworkError(
            f"Unknown network '{name}' (available: {', '.join(sorted(NETWORK_CONFIG))})"
        )

    network_config: Dict[str, Any] = NETWORK_CONFIG[name]
    url_env = network_config.get("url_env")
    accounts_env = network_config.get("accounts_env")

    url = _optional(environ, url_env)
    key = normalize_private_key(_optional(environ, accounts_env))
    accounts = (key,) if key is not None else ()

    is_local = network_config.get("is_local", False)
    if not is_local:
        if url is None:
            logger.debug("Network '%s': $%s is not set", name, url_env)
        if not accounts:
            logger.debug("Network '%s': $%s is not set", name, accounts_env)

    return NetworkConfiguration(
        name=name,
        chain_id=network_config.get("chain_id"),
        url=url,
        accounts=accounts,
        chain_name=network_config.get("chain_name"),
        block_explorer_url=network_config.get("block_explorer_url"),
        url_env=url_env,
        accounts_env=accounts_env,
        is_local=is_local,
    )


def validate_url(name: str, url: Optional[str], env_name: Optional[str] = None) -> str:
    """
    Check that a network endpoint is a usable URL.

    Args:
        name: Network name (for error messages)
        url: Endpoint URL
        env_name: Variable the URL came from (for error messages)

    Returns:
        The URL, unchanged

    Raises:
        MissingEnvironmentError: If the URL is absent or empty
        InvalidUrlError: If the scheme is unsupported or the host is missing
    """
    if url is None or not url.strip():
        source = f"set ${env_name}" if env_name else "configure a URL"
        raise MissingEnvironmentError(f"No RPC URL for network '{name}': {source}")

    parsed = urlparse(url)
    if parsed.scheme not in URL_SCHEMES:
        raise InvalidUrlError(
            f"RPC URL for network '{name}' must use one of {', '.join(URL_SCHEMES)} "
            f"(got scheme {parsed.scheme!r})"
        )
    if not parsed.netloc:
        raise InvalidUrlError(f"RPC URL for network '{name}' has no host")

    return url


def validate_private_key(name: str, key: str) -> str:
    """
    Check that a signing key is 0x followed by 32 bytes of hex.

    Raises:
        InvalidCredentialError: If the key is malformed
    """
    if not _PRIVATE_KEY_RE.match(key):
        raise InvalidCredentialError(
            f"Signing key for network '{name}' must be 0x followed by 64 hex "
            f"characters (got {redact(key)})"
        )
    return key


def require_remote(network: NetworkConfiguration) -> NetworkConfiguration:
    """
    Validate a network at the moment a network operation is attempted.

    Local simulated networks need neither URL nor keys and pass unchanged.

    Args:
        network: Network to validate

    Returns:
        The same network record

    Raises:
        MissingEnvironmentError: If the URL or signing key is absent
        InvalidUrlError: If the URL is malformed
        InvalidCredentialError: If a signing key is malformed
    """
    if network.is_local:
        return network

    validate_url(network.name, network.url, network.url_env)

    if not network.accounts:
        source = f"set ${network.accounts_env}" if network.accounts_env else "configure a key"
        raise MissingEnvironmentError(
            f"No signing key for network '{network.name}': {source}"
        )
    for key in network.accounts:
        validate_private_key(network.name, key)

    return network


def redact(value: Optional[str], visible: int = 4) -> str:
    """
    Mask a secret for logging, keeping the 0x prefix and the last characters.

    Args:
        value: Secret value
        visible: Number of trailing characters to keep

    Returns:
        Redacted string, e.g. "0x…cdef"
    """
    if not value:
        return "<unset>"
    body = value[2:] if value[:2].lower() == "0x" else value
    if len(body) <= visible:
        return "0x…" if value[:2].lower() == "0x" else "…"
    prefix = "0x" if value[:2].lower() == "0x" else ""
    return f"{prefix}…{body[-visible:]}"


def network_summary(network: NetworkConfiguration) -> Dict[str, Any]:
    """
    Safe-to-log view of a network record.

    Returns:
        Dictionary with name, chain_id, url, redacted accounts and local flag
    """
    return {
        "name": network.name,
        "chain_id": network.chain_id,
        "url": network.url,
        "accounts": [redact(key) for key in network.accounts],
        "is_local": network.is_local,
    }
