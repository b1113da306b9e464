"""Fixtures for testbed-deployer tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from testbed_deployer.cluster import KubernetesClusterClient

TESTDATA_DIR = Path(__file__).parent / "testdata"


@pytest.fixture(name="testdata_dir")
def mock_testdata_dir() -> Path:
    """Directory with the test templates."""
    return TESTDATA_DIR


@pytest.fixture(name="jupyter_service")
def mock_jupyter_service() -> dict:
    """The decoded jupyter Service expected to be created."""
    return yaml.load(
        (TESTDATA_DIR / "jupyter/jupyter.yaml").read_text(), Loader=yaml.SafeLoader
    )


@pytest.fixture(name="core_v1")
def mock_core_v1() -> MagicMock:
    """Fake CoreV1Api."""
    return MagicMock()


@pytest.fixture(name="apps_v1")
def mock_apps_v1() -> MagicMock:
    """Fake AppsV1Api."""
    return MagicMock()


@pytest.fixture(name="cluster_client")
def mock_cluster_client(
    core_v1: MagicMock, apps_v1: MagicMock
) -> KubernetesClusterClient:
    """Cluster client that records calls instead of contacting a cluster."""
    return KubernetesClusterClient(core_v1, apps_v1)
