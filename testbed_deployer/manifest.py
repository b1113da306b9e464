"""Representation of the resource described by a rendered manifest.

A manifest holds exactly one Kubernetes resource. Decoding checks the fields
needed to create the resource (`apiVersion`, `kind` and `metadata.name`) and
keeps the whole document as the body sent to the cluster API.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging
from typing import Any

import yaml
from mashumaro import DataClassDictMixin, field_options
from mashumaro.config import BaseConfig
from mashumaro.exceptions import InvalidFieldValue, MissingField

from .exceptions import ManifestParseError

__all__ = [
    "Resource",
    "ObjectMeta",
    "ManifestDecoder",
    "YamlManifestDecoder",
    "SUPPORTED_KINDS",
]

_LOGGER = logging.getLogger(__name__)


CORE_API_VERSION = "v1"
APPS_API_VERSION = "apps/v1"

# The apiVersion expected for each kind that can be created.
SUPPORTED_KINDS = {
    "Service": CORE_API_VERSION,
    "Pod": CORE_API_VERSION,
    "ConfigMap": CORE_API_VERSION,
    "Secret": CORE_API_VERSION,
    "PersistentVolumeClaim": CORE_API_VERSION,
    "Deployment": APPS_API_VERSION,
    "StatefulSet": APPS_API_VERSION,
    "DaemonSet": APPS_API_VERSION,
}


@dataclass
class ObjectMeta(DataClassDictMixin):
    """The metadata fields of a resource used by this tool."""

    name: str
    """The name of the object."""

    namespace: str | None = None
    """The namespace declared by the object, if any."""

    labels: dict[str, str] | None = None
    """Labels on the object."""

    class Config(BaseConfig):
        omit_none = True


@dataclass
class Resource(DataClassDictMixin):
    """A single Kubernetes resource decoded from a manifest."""

    api_version: str = field(metadata=field_options(alias="apiVersion"))
    """The apiVersion of the object."""

    kind: str
    """The kind of the object."""

    metadata: ObjectMeta
    """The metadata of the object."""

    body: dict[str, Any] = field(
        default_factory=dict, metadata={"serialize": "omit"}
    )
    """The complete document submitted to the cluster API."""

    @property
    def name(self) -> str:
        """The name of the object."""
        return self.metadata.name

    def __str__(self) -> str:
        """Return the kind and name concatenated as an id."""
        return f"{self.kind}/{self.name}"

    @classmethod
    def parse_doc(cls, doc: dict[str, Any]) -> "Resource":
        """Parse a Resource from a raw kubernetes object."""
        try:
            resource = cls.from_dict(doc)
        except MissingField as err:
            raise ManifestParseError(
                f"Invalid object missing {err.field_name}: {doc}"
            ) from err
        except InvalidFieldValue as err:
            raise ManifestParseError(
                f"Invalid object field {err.field_name}: {doc}"
            ) from err
        if not resource.metadata.name:
            raise ManifestParseError(f"Invalid object missing metadata.name: {doc}")
        if (expected := SUPPORTED_KINDS.get(resource.kind)) is None:
            raise ManifestParseError(f"Unsupported kind '{resource.kind}': {doc}")
        if resource.api_version != expected:
            raise ManifestParseError(
                f"Invalid object expected apiVersion '{expected}' for "
                f"{resource.kind}: {doc}"
            )
        resource.body = doc
        return resource

    class Config(BaseConfig):
        serialize_by_alias = True
        omit_none = True


class ManifestDecoder(ABC):
    """Interface for decoding a rendered manifest into a Resource."""

    @abstractmethod
    def decode(self, content: str) -> Resource:
        """Decode the manifest text, raising ManifestParseError if invalid."""


class YamlManifestDecoder(ManifestDecoder):
    """Decodes a manifest holding a single YAML document."""

    def decode(self, content: str) -> Resource:
        """Decode the manifest text, raising ManifestParseError if invalid."""
        try:
            docs = [
                doc
                for doc in yaml.load_all(content, Loader=yaml.SafeLoader)
                if doc is not None
            ]
        except yaml.YAMLError as err:
            raise ManifestParseError(f"Unable to parse manifest: {err}") from err
        if len(docs) != 1:
            raise ManifestParseError(
                f"Expected a single resource in manifest, found {len(docs)}"
            )
        if not isinstance(docs[0], dict):
            raise ManifestParseError(
                f"Expected manifest to be a resource object, found {type(docs[0])}"
            )
        resource = Resource.parse_doc(docs[0])
        _LOGGER.debug("Decoded resource %s", resource)
        return resource
