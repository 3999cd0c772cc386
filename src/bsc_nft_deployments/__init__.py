"""
bsc-nft-deployments: compiler, network and deployment module configuration
for the NFT contracts on BNB Smart Chain
"""

from importlib.metadata import PackageNotFoundError, version

from .compiler import to_solc_settings, validate_compiler_settings
from .config import load_config
from .exceptions import (
    ChainIdMismatchError,
    ConfigurationError,
    CyclicDependencyError,
    DeploymentModuleNotFoundError,
    DuplicateStepError,
    EnvironmentFileNotFoundError,
    InvalidCompilerSettingsError,
    InvalidCredentialError,
    InvalidUrlError,
    MissingEnvironmentError,
    ModuleDefinitionError,
    UnknownDependencyError,
    UnknownNetworkError,
    UnsupportedCompilerVersionError,
)
from .ignition import NFT_COLLECTION_MODULE, NFT_MODULE, get_module, module_names
from .modules import ContractFuture, ModuleBuilder, build_module, execution_order
from .networks import require_remote
from .types import (
    CompilerSettings,
    ContractStep,
    DeploymentModule,
    NetworkConfiguration,
    ProjectConfig,
)

try:
    __version__ = version("bsc-nft-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "load_config",
    "require_remote",
    "validate_compiler_settings",
    "to_solc_settings",
    "build_module",
    "execution_order",
    "get_module",
    "module_names",
    "NFT_MODULE",
    "NFT_COLLECTION_MODULE",
    "ModuleBuilder",
    "ContractFuture",
    "CompilerSettings",
    "ContractStep",
    "DeploymentModule",
    "NetworkConfiguration",
    "ProjectConfig",
    "ConfigurationError",
    "MissingEnvironmentError",
    "EnvironmentFileNotFoundError",
    "UnknownNetworkError",
    "InvalidUrlError",
    "InvalidCredentialError",
    "UnsupportedCompilerVersionError",
    "InvalidCompilerSettingsError",
    "ChainIdMismatchError",
    "ModuleDefinitionError",
    "DuplicateStepError",
    "UnknownDependencyError",
    "CyclicDependencyError",
    "DeploymentModuleNotFoundError",
]
