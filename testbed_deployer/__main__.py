"""Allow running the command line tool with `python -m testbed_deployer`."""

from .tool.testbed_deploy import main

if __name__ == "__main__":
    main()
