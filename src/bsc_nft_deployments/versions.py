"""Solc release list utilities for bsc-nft-deployments library."""

import logging
from typing import Any, Dict, List

import requests

from .constants import SOLC_LIST_URL

logger = logging.getLogger(__name__)


def filter_stable_releases(builds: List[Dict[str, Any]]) -> List[str]:
    """
    Filter solc builds to only include stable releases.

    Stable releases:
    - Have a version field
    - Have no prerelease marker (nightly builds carry one)

    Args:
        builds: "builds" entries from the solc list.json

    Returns:
        Stable version strings, in input order, without duplicates
    """
    seen = set()
    result = []
    for build in builds:
        version = build.get("version")
        if not version or build.get("prerelease"):
            continue
        if version in seen:
            continue
        seen.add(version)
        result.append(version)
    return result


def fetch_solc_releases(url: str = SOLC_LIST_URL, timeout: int = 30) -> List[str]:
    """
    Fetch stable solc versions from the upstream release list.

    Args:
        url: list.json URL
        timeout: Request timeout in seconds

    Returns:
        Stable version strings

    Raises:
        KeyError: If the response is missing the builds field
        RuntimeError: If the request fails
    """
    try:
        response = requests.get(url, timeout=timeout)

        if response.status_code != 200:
            raise RuntimeError(
                f"Solc release list request failed with status {response.status_code}"
            )

        builds = response.json()["builds"]

    except requests.RequestException as e:
        raise RuntimeError(f"Network error fetching solc release list: {e}") from e

    releases = filter_stable_releases(builds)
    logger.debug("Fetched %d stable solc releases from %s", len(releases), url)
    return releases
