"""Tests for manifest library."""

from pathlib import Path

import pytest

from testbed_deployer.exceptions import ManifestParseError
from testbed_deployer.manifest import Resource, YamlManifestDecoder


def test_decode_service(testdata_dir: Path) -> None:
    """Test decoding a Service manifest."""
    content = (testdata_dir / "jupyter/jupyter.yaml").read_text()
    resource = YamlManifestDecoder().decode(content)
    assert resource.kind == "Service"
    assert resource.api_version == "v1"
    assert resource.name == "jupyter"
    assert resource.metadata.labels == {"app": "jupyter"}
    assert resource.metadata.namespace is None
    assert resource.body["spec"]["type"] == "LoadBalancer"
    assert resource.body["spec"]["ports"] == [
        {"port": 80, "name": "http", "targetPort": 8888}
    ]


def test_compact_dict() -> None:
    """Test the serialized form omits the body and uses field aliases."""
    resource = Resource.parse_doc(
        {
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": {"name": "settings", "namespace": "default"},
            "data": {"key": "value"},
        }
    )
    assert resource.to_dict() == {
        "apiVersion": "v1",
        "kind": "ConfigMap",
        "metadata": {"name": "settings", "namespace": "default"},
    }


def test_decode_ignores_empty_documents() -> None:
    """Test separators around a single document are allowed."""
    resource = YamlManifestDecoder().decode(
        "---\napiVersion: apps/v1\nkind: Deployment\nmetadata:\n  name: app\n---\n"
    )
    assert str(resource) == "Deployment/app"


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ("kind: [Service", "Unable to parse manifest"),
        ("", "found 0"),
        (
            "apiVersion: v1\nkind: Service\nmetadata:\n  name: a\n---\n"
            "apiVersion: v1\nkind: Service\nmetadata:\n  name: b\n",
            "found 2",
        ),
        ("- apiVersion: v1", "Expected manifest to be a resource object"),
        ("kind: Service\nmetadata:\n  name: a\n", "missing"),
        ("apiVersion: v1\nmetadata:\n  name: a\n", "missing"),
        ("apiVersion: v1\nkind: Service\n", "missing"),
        ("apiVersion: v1\nkind: Service\nmetadata:\n  name: ''\n", "metadata.name"),
        ("apiVersion: v1\nkind: Widget\nmetadata:\n  name: a\n", "Unsupported kind"),
        (
            "apiVersion: v1\nkind: Deployment\nmetadata:\n  name: a\n",
            "expected apiVersion 'apps/v1'",
        ),
    ],
)
def test_decode_invalid(content: str, match: str) -> None:
    """Test manifests that can't be decoded into a single resource."""
    with pytest.raises(ManifestParseError, match=match):
        YamlManifestDecoder().decode(content)
