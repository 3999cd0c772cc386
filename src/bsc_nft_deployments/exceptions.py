"""Custom exception classes for bsc-nft-deployments library."""


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""

    pass


class MissingEnvironmentError(ConfigurationError, ValueError):
    """Raised when a required environment value is absent at time of use."""

    pass


class EnvironmentFileNotFoundError(ConfigurationError, FileNotFoundError):
    """Raised when an explicitly requested .env file does not exist."""

    pass


class UnknownNetworkError(ConfigurationError, ValueError):
    """Raised when a network or profile name is not declared."""

    pass


class InvalidUrlError(ConfigurationError, ValueError):
    """Raised when a network endpoint is not a usable URL."""

    pass


class InvalidCredentialError(ConfigurationError, ValueError):
    """Raised when a signing key is malformed."""

    pass


class UnsupportedCompilerVersionError(ConfigurationError, ValueError):
    """Raised when the solc version is not a supported release."""

    pass


class InvalidCompilerSettingsError(ConfigurationError, ValueError):
    """Raised when optimizer settings are out of range."""

    pass


class ChainIdMismatchError(ConfigurationError, ValueError):
    """Raised when an endpoint reports a different chain than declared."""

    pass


class ModuleDefinitionError(ConfigurationError, ValueError):
    """Base exception for malformed deployment modules."""

    pass


class DuplicateStepError(ModuleDefinitionError):
    """Raised when two steps in a module share an id."""

    pass


class UnknownDependencyError(ModuleDefinitionError):
    """Raised when a step depends on a step that is not in the module."""

    pass


class CyclicDependencyError(ModuleDefinitionError):
    """Raised when the step dependency graph contains a cycle."""

    pass


class DeploymentModuleNotFoundError(ConfigurationError, LookupError):
    """Raised when a deployment module name is not registered."""

    pass
