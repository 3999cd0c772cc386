"""Data types and dataclasses for bsc-nft-deployments library."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from .exceptions import UnknownNetworkError


@dataclass(frozen=True)
class NetworkConfiguration:
    """Connection parameters for one blockchain network."""

    # Required fields
    name: str  # e.g., "bscTestnet"

    # Optional fields (deferred until a network operation is attempted)
    chain_id: Optional[int] = None
    url: Optional[str] = None
    accounts: Tuple[str, ...] = ()
    chain_name: Optional[str] = None
    block_explorer_url: Optional[str] = None
    url_env: Optional[str] = None  # Variable the URL was read from
    accounts_env: Optional[str] = None  # Variable the key was read from
    is_local: bool = False  # In-process simulated network

    def address_url(self, address: str) -> Optional[str]:
        """Block explorer link for an address, if the network has an explorer."""
        if self.block_explorer_url is None:
            return None
        return f"{self.block_explorer_url}/address/{address}"


@dataclass(frozen=True)
class CompilerSettings:
    """Target solc version and optimizer policy."""

    version: str  # e.g., "0.8.20"
    optimizer_enabled: bool = True
    optimizer_runs: int = 200


@dataclass(frozen=True)
class ContractStep:
    """One contract instantiation within a deployment module."""

    id: str  # Unique within the module
    contract_name: str  # Contract type, e.g., "NFTFactory"
    args: Tuple[Any, ...] = ()
    dependencies: Tuple[str, ...] = ()  # Step ids that must run first


@dataclass(frozen=True)
class DeploymentModule:
    """Named declarative recipe for instantiating contracts."""

    name: str
    steps: Mapping[str, ContractStep] = field(default_factory=dict)
    results: Mapping[str, str] = field(default_factory=dict)  # result name -> step id

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", MappingProxyType(dict(self.steps)))
        object.__setattr__(self, "results", MappingProxyType(dict(self.results)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeploymentModule):
            return NotImplemented
        return (
            self.name == other.name
            and dict(self.steps) == dict(other.steps)
            and dict(self.results) == dict(other.results)
        )

    def __hash__(self) -> int:
        return hash((self.name, tuple(self.steps.items()), tuple(self.results.items())))

    def contract_names(self) -> Tuple[str, ...]:
        """Contract types instantiated by this module, in declaration order."""
        return tuple(step.contract_name for step in self.steps.values())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeploymentModule":
        """
        Build and validate a module from a plain mapping.

        Expected shape::

            {
                "name": "NFTModule",
                "steps": [
                    {"id": "NFTFactory", "contract": "NFTFactory",
                     "args": [], "after": []}
                ],
                "results": {"nftFactory": "NFTFactory"}
            }

        Raises:
            DuplicateStepError: If two steps share an id
            UnknownDependencyError: If a step depends on an undeclared step
            CyclicDependencyError: If the dependency graph has a cycle
        """
        # Deferred import: modules.py depends on this file
        from .modules import from_mapping

        return from_mapping(data)


@dataclass(frozen=True)
class ProjectConfig:
    """Compiler settings plus every declared network, with a selected profile."""

    compiler: CompilerSettings
    networks: Mapping[str, NetworkConfiguration]
    default_network: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectConfig):
            return NotImplemented
        return (
            self.compiler == other.compiler
            and dict(self.networks) == dict(other.networks)
            and self.default_network == other.default_network
        )

    def __hash__(self) -> int:
        return hash((self.compiler, tuple(self.networks.items()), self.default_network))

    def network(self, name: Optional[str] = None) -> NetworkConfiguration:
        """
        Look up a declared network.

        Args:
            name: Network name (defaults to the selected profile)

        Raises:
            UnknownNetworkError: If the network is not declared
        """
        if name is None:
            name = self.default_network
        if name not in self.networks:
            raise UnknownNetworkError(
                f"Network '{name}' is not declared "
                f"(available: {', '.join(sorted(self.networks))})"
            )
        return self.networks[name]

    def resolve_network(self, name: Optional[str] = None) -> NetworkConfiguration:
        """
        Look up a network and validate it for a network operation.

        Raises:
            UnknownNetworkError: If the network is not declared
            MissingEnvironmentError: If its URL or signing key is absent
            InvalidUrlError: If its URL is malformed
            InvalidCredentialError: If its signing key is malformed
        """
        from .networks import require_remote

        return require_remote(self.network(name))
