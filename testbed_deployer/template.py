"""Library for rendering application manifest templates.

Templates are YAML documents with `${name}` placeholders, for example:

```yaml
spec:
  containers:
  - image: jupyter/base-notebook:${jupyter_version}
```

Every placeholder must have a value in the template data, otherwise rendering
fails rather than producing a manifest with an empty field.
"""

import base64
from collections.abc import Mapping
import logging
from pathlib import Path

import jinja2

from .exceptions import TemplateNotFoundError, TemplateRenderError
from .locator import format_path

__all__ = [
    "render_template",
]

_LOGGER = logging.getLogger(__name__)

VARIABLE_START = "${"
VARIABLE_END = "}"


def b64encode(value: str) -> str:
    """Base64 encode a value, e.g. for the `data` field of a Secret."""
    return base64.b64encode(str(value).encode("utf-8")).decode("utf-8")


def _make_environment(template_dir: Path) -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        undefined=jinja2.StrictUndefined,
        variable_start_string=VARIABLE_START,
        variable_end_string=VARIABLE_END,
        keep_trailing_newline=True,
        autoescape=False,
    )
    # Only the template data may resolve a placeholder
    env.globals.clear()
    env.filters["b64encode"] = b64encode
    return env


def render_template(path: Path, data: Mapping[str, str]) -> str:
    """Render the template at the path with the template data."""
    _LOGGER.debug("Rendering template %s", format_path(path))
    env = _make_environment(path.parent)
    try:
        template = env.get_template(path.name)
        return template.render(dict(data))
    except jinja2.TemplateNotFound as err:
        raise TemplateNotFoundError(f"Template not found: {format_path(path)}") from err
    except jinja2.TemplateSyntaxError as err:
        raise TemplateRenderError(
            f"Invalid template {format_path(path)} line {err.lineno}: {err.message}"
        ) from err
    except jinja2.TemplateError as err:
        raise TemplateRenderError(
            f"Unable to render template {format_path(path)}: {err}"
        ) from err
    except UnicodeDecodeError as err:
        raise TemplateRenderError(
            f"Template {format_path(path)} is not valid UTF-8: {err}"
        ) from err
