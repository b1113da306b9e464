"""Orchestration of a single deployment run.

The steps run in order and the first failure aborts the run, so the cluster
API is only called once the manifest has been located, rendered and decoded.
"""

from collections.abc import Sequence
import logging
from pathlib import Path

from .cluster import DEFAULT_NAMESPACE, ClusterClient
from .config import Invocation, parse_invocation
from .exceptions import DeployerException
from .locator import DEFAULT_TEMPLATE_DIR, find_template
from .manifest import ManifestDecoder, Resource, YamlManifestDecoder
from .template import render_template

__all__ = [
    "Runner",
]

_LOGGER = logging.getLogger(__name__)


class Runner:
    """Renders an application's template and creates it in the cluster.

    A Runner without a cluster client can still render and decode manifests,
    e.g. for a dry run, but can't deploy them.
    """

    def __init__(
        self,
        cluster: ClusterClient | None = None,
        decoder: ManifestDecoder | None = None,
        default_dir: Path = DEFAULT_TEMPLATE_DIR,
    ) -> None:
        """Initialize Runner."""
        self._cluster = cluster
        self._decoder = decoder or YamlManifestDecoder()
        self._default_dir = default_dir

    def run(self, args: Sequence[str] | None = None) -> Resource:
        """Parse the command line arguments and deploy the application."""
        return self.deploy(parse_invocation(args))

    def render(self, invocation: Invocation) -> str:
        """Return the rendered manifest for the invocation."""
        path = find_template(
            invocation.app, invocation.config_path, default_dir=self._default_dir
        )
        return render_template(path, invocation.template_data)

    def decode(self, content: str) -> Resource:
        """Decode a rendered manifest into a Resource."""
        return self._decoder.decode(content)

    def deploy(self, invocation: Invocation) -> Resource:
        """Create the resource for the invocation in the cluster."""
        if self._cluster is None:
            raise DeployerException("Unable to deploy without a cluster client")
        resource = self.decode(self.render(invocation))
        self._cluster.create(resource, namespace=DEFAULT_NAMESPACE)
        return resource
