"""Command line tool for rendering an application template and creating it."""

import argparse
import logging
import sys
import traceback

from kubernetes.client.exceptions import ApiException

from testbed_deployer.exceptions import DeployerException
from . import deploy

_LOGGER = logging.getLogger(__name__)


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="testbed-deploy",
        description="Render an application manifest template and create it in "
        "the default namespace of a Kubernetes cluster.",
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )
    deploy.DeployAction.register(parser)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Testbed-deploy command line tool main entry point."""
    parser = _make_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        logging.basicConfig(level=args.log_level)

    action = args.cls()
    try:
        action.run(**vars(args))
    except (DeployerException, ApiException) as err:
        if args.log_level == "DEBUG":
            traceback.print_exc(file=sys.stderr)
        print("testbed-deploy error: ", err, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
