"""Exceptions related to testbed-deployer."""

__all__ = [
    "DeployerException",
    "InputException",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "ManifestParseError",
    "ClusterConfigError",
]


class DeployerException(Exception):
    """Generic base exception used for this library."""


class InputException(DeployerException):
    """Raised when the invocation values are not formatted as expected."""


class TemplateNotFoundError(DeployerException, FileNotFoundError):
    """Raised when an application template does not exist."""


class TemplateRenderError(DeployerException):
    """Raised when a template has an unresolved placeholder or is malformed."""


class ManifestParseError(DeployerException):
    """Raised when a rendered manifest is not a single supported resource."""


class ClusterConfigError(DeployerException):
    """Raised when credentials for the cluster API could not be loaded."""
