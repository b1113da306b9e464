"""Configuration objects for testbed-deployer.

An `Invocation` describes what to deploy and is built once per run from the
command line flags. A `ClusterConfig` describes how to reach the cluster API.
"""

from argparse import Action, ArgumentError, ArgumentParser, Namespace
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .exceptions import InputException

__all__ = [
    "Invocation",
    "ClusterConfig",
    "add_invocation_flags",
    "add_cluster_flags",
    "parse_invocation",
    "parse_template_data",
]

_LOGGER = logging.getLogger(__name__)


def parse_template_data(value: str) -> dict[str, str]:
    """Parse the template data literal into a mapping of strings.

    The literal is read as a YAML flow mapping, which accepts strict JSON
    (`{"key": "value"}`) as well as single quoted strings (`{'key':'value'}`).
    Scalar values are converted to strings.
    """
    try:
        data = yaml.load(value, Loader=yaml.SafeLoader)
    except yaml.YAMLError as err:
        raise InputException(f"Template data is not a valid JSON object: {err}")
    if not isinstance(data, dict):
        raise InputException(f"Template data must be a JSON object, got: {value}")
    result: dict[str, str] = {}
    for key, item in data.items():
        if not isinstance(key, str):
            raise InputException(f"Template data key must be a string: {key!r}")
        if item is None or isinstance(item, (dict, list)):
            raise InputException(
                f"Template data value for '{key}' must be a string, got: {item!r}"
            )
        if isinstance(item, bool):
            result[key] = "true" if item else "false"
        else:
            result[key] = str(item)
    return result


class TemplateDataAction(Action):
    """Parse the template data flag into a mapping."""

    def __call__(
        self,
        parser: ArgumentParser,
        namespace: Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        try:
            data = parse_template_data(values)
        except InputException as err:
            raise ArgumentError(self, str(err))
        setattr(namespace, self.dest, data)


@dataclass(frozen=True)
class Invocation:
    """A single request to render and create an application's resource."""

    app: str
    """Name of the application, used to find its template."""

    config_path: Path | None = None
    """Optional directory to search for the template instead of the bundled one."""

    template_data: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    """Values substituted for the placeholders in the template, read only."""

    def __post_init__(self) -> None:
        """Copy the template data into a read only mapping."""
        object.__setattr__(
            self, "template_data", MappingProxyType(dict(self.template_data))
        )

    @classmethod
    def from_args(cls, args: Namespace) -> "Invocation":
        """Build an Invocation from parsed command line arguments."""
        return cls(
            app=args.app,
            config_path=args.config_path,
            template_data=dict(args.template_data),
        )


@dataclass(frozen=True)
class ClusterConfig:
    """Connection settings for the cluster API."""

    kubeconfig: Path | None = None
    """Kubeconfig file, otherwise in-cluster or the default kubeconfig is used."""

    context: str | None = None
    """Kubeconfig context to use instead of the current context."""

    @classmethod
    def from_args(cls, args: Namespace) -> "ClusterConfig":
        """Build a ClusterConfig from parsed command line arguments."""
        return cls(kubeconfig=args.kubeconfig, context=args.context)


def add_invocation_flags(args: ArgumentParser) -> None:
    """Add the flags describing what to deploy."""
    args.add_argument(
        "--app",
        required=True,
        help="Name of the application whose template is deployed",
    )
    args.add_argument(
        "--configPath",
        "--config-path",
        dest="config_path",
        type=Path,
        default=None,
        help="Optional directory containing <app>/<app>.yaml templates",
    )
    args.add_argument(
        "--templateData",
        "--template-data",
        dest="template_data",
        required=True,
        action=TemplateDataAction,
        help="JSON object of values for the template placeholders",
    )


def add_cluster_flags(args: ArgumentParser) -> None:
    """Add the flags describing how to reach the cluster."""
    args.add_argument(
        "--kubeconfig",
        type=Path,
        default=None,
        help="Path to a kubeconfig file, defaults to in-cluster or ~/.kube/config",
    )
    args.add_argument(
        "--context",
        type=str,
        default=None,
        help="Kubeconfig context to use",
    )


def parse_invocation(args: Sequence[str] | None = None) -> Invocation:
    """Parse an Invocation from command line argument strings."""
    parser = ArgumentParser(
        description="Render an application template and create it in a cluster."
    )
    add_invocation_flags(parser)
    invocation = Invocation.from_args(parser.parse_args(args))
    _LOGGER.debug("Parsed invocation: %s", invocation)
    return invocation
