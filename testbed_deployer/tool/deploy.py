"""Testbed-deploy deploy action."""

from argparse import ArgumentParser, BooleanOptionalAction
import logging
import pathlib

from testbed_deployer import cluster
from testbed_deployer.config import (
    ClusterConfig,
    Invocation,
    add_cluster_flags,
    add_invocation_flags,
)
from testbed_deployer.runner import Runner

_LOGGER = logging.getLogger(__name__)


class DeployAction:
    """Testbed-deploy deploy action."""

    @classmethod
    def register(cls, args: ArgumentParser) -> ArgumentParser:
        """Register the command flags."""
        add_invocation_flags(args)
        add_cluster_flags(args)
        args.add_argument(
            "--dry-run",
            type=bool,
            action=BooleanOptionalAction,
            default=False,
            help="Render and validate the manifest without creating it",
        )
        args.add_argument(
            "--output-file",
            type=str,
            default="/dev/stdout",
            help="Output file for the rendered manifest of a dry run",
        )
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        app: str,
        config_path: pathlib.Path | None,
        template_data: dict[str, str],
        kubeconfig: pathlib.Path | None,
        context: str | None,
        dry_run: bool,
        output_file: str,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        invocation = Invocation(
            app=app, config_path=config_path, template_data=template_data
        )
        if dry_run:
            runner = Runner()
            content = runner.render(invocation)
            resource = runner.decode(content)
            _LOGGER.info("Dry run, not creating %s", resource)
            with open(output_file, "w") as file:
                file.write(content)
            return

        client = cluster.load_cluster_client(
            ClusterConfig(kubeconfig=kubeconfig, context=context)
        )
        resource = Runner(client).deploy(invocation)
        print(f"{resource} created")
