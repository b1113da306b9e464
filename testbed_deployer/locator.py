"""Library for finding the manifest template of an application.

Templates are laid out one folder per application, e.g. `jupyter/jupyter.yaml`.
A template directory supplied by the user must contain the template; it never
falls back to the templates bundled with this package.
"""

import logging
from pathlib import Path

from .exceptions import InputException, TemplateNotFoundError

__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "find_template",
    "format_path",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "application"

TEMPLATE_SUFFIXES = (".yaml", ".yml")


def format_path(path: Path) -> str:
    """Format path for debugging."""
    if path.is_absolute():
        cwd = Path.cwd()
        if path.is_relative_to(cwd):
            rel_path = str(path.relative_to(cwd))
            return f"{rel_path} (abs)"
    return str(path)


def _check_app_name(app: str) -> None:
    """Assert the application name is a single path component."""
    if not app or app in (".", "..") or "/" in app or "\\" in app:
        raise InputException(f"Invalid application name: '{app}'")


def _candidates(app: str, config_path: Path) -> list[Path]:
    """Return the template paths to try, in order of preference."""
    nested = [config_path / app / f"{app}{suffix}" for suffix in TEMPLATE_SUFFIXES]
    flat = [config_path / f"{app}{suffix}" for suffix in TEMPLATE_SUFFIXES]
    return nested + flat


def find_template(
    app: str,
    config_path: Path | None = None,
    default_dir: Path = DEFAULT_TEMPLATE_DIR,
) -> Path:
    """Return the absolute path to the template for the application."""
    _check_app_name(app)
    if config_path is None:
        path = (default_dir / app / f"{app}.yaml").absolute()
        _LOGGER.debug("Using bundled template %s", format_path(path))
        return path

    for candidate in _candidates(app, config_path):
        if candidate.is_file():
            _LOGGER.debug("Found template %s", format_path(candidate))
            return candidate.absolute()
    raise TemplateNotFoundError(
        f"Template for application '{app}' not found in {format_path(config_path)}"
    )
