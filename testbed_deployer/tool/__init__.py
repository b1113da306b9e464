"""Command line tool for testbed-deployer."""
