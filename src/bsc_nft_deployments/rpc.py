"""JSON-RPC endpoint checks for bsc-nft-deployments library."""

import logging

import requests

from .exceptions import ChainIdMismatchError
from .networks import require_remote
from .types import NetworkConfiguration

logger = logging.getLogger(__name__)


def get_chain_id(rpc_url: str, timeout: int = 30) -> int:
    """
    Query an endpoint's chain id via eth_chainId.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Chain id reported by the endpoint

    Raises:
        KeyError: If RPC response is missing required fields
        ValueError: If RPC returns an error
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=timeout,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        return int(result["result"], 16)

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def verify_chain_id(network: NetworkConfiguration, timeout: int = 30) -> int:
    """
    Check that a network's endpoint serves the declared chain.

    The network is validated for remote use first, so a missing URL or key
    fails before any request is made.

    Args:
        network: Network to check
        timeout: Request timeout in seconds

    Returns:
        Chain id reported by the endpoint

    Raises:
        MissingEnvironmentError: If the URL or signing key is absent
        InvalidUrlError: If the URL is malformed
        InvalidCredentialError: If a signing key is malformed
        ChainIdMismatchError: If the endpoint reports a different chain id
    """
    require_remote(network)

    if network.is_local:
        # Simulated network runs in-process; nothing to query
        return network.chain_id

    logger.debug("Querying chain id for network '%s'", network.name)
    chain_id = get_chain_id(network.url, timeout=timeout)

    if network.chain_id is not None and chain_id != network.chain_id:
        raise ChainIdMismatchError(
            f"Network '{network.name}' expects chain id {network.chain_id}, "
            f"endpoint reports {chain_id}"
        )

    return chain_id
