"""Deployment module declarations for the NFT contracts."""

from typing import Dict, List

from .exceptions import DeploymentModuleNotFoundError
from .modules import build_module
from .types import DeploymentModule

# Deploys the factory that creates NFT collections
NFT_MODULE = build_module(
    "NFTModule",
    lambda m: {"nftFactory": m.contract("NFTFactory")},
)

# Deploys a standalone collection
NFT_COLLECTION_MODULE = build_module(
    "NFTCollectionModule",
    lambda m: {"nftCollection": m.contract("NFTCollection")},
)

MODULES: Dict[str, DeploymentModule] = {
    module.name: module for module in (NFT_MODULE, NFT_COLLECTION_MODULE)
}


def module_names() -> List[str]:
    """Names of all registered deployment modules, sorted."""
    return sorted(MODULES)


def get_module(name: str) -> DeploymentModule:
    """
    Look up a registered deployment module.

    Raises:
        DeploymentModuleNotFoundError: If no module has this name
    """
    if name not in MODULES:
        raise DeploymentModuleNotFoundError(
            f"Deployment module '{name}' not found (available: {', '.join(module_names())})"
        )
    return MODULES[name]
