"""
Render an application manifest template and create it in a Kubernetes cluster.

The pipeline for a single run is:
  - Locate the template for the application (`locator`)
  - Fill the `${name}` placeholders with the template data (`template`)
  - Decode the result into a single resource (`manifest`)
  - Create the resource in the `default` namespace (`cluster`)

The `runner` module wires these steps together and the `tool` module exposes
them as the `testbed-deploy` command line program.
"""

__all__ = [
    "cluster",
    "config",
    "exceptions",
    "locator",
    "manifest",
    "runner",
    "template",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
