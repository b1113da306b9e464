"""Tests for template library."""

from pathlib import Path

import pytest

from testbed_deployer.exceptions import TemplateNotFoundError, TemplateRenderError
from testbed_deployer.template import render_template


def test_render(testdata_dir: Path) -> None:
    """Test placeholders are replaced with the template data."""
    content = render_template(
        testdata_dir / "flat/jupyter.yml", {"jupyter_version": "notebook-6.0.3"}
    )
    assert "image: jupyter/base-notebook:notebook-6.0.3\n" in content
    assert "${" not in content
    assert content.endswith("\n")


def test_render_repeatable(testdata_dir: Path) -> None:
    """Test rendering twice returns identical content."""
    path = testdata_dir / "flat/jupyter.yml"
    data = {"jupyter_version": "notebook-6.0.3"}
    assert render_template(path, data) == render_template(path, data)


def test_render_without_placeholders(testdata_dir: Path) -> None:
    """Test a template without placeholders is returned as is."""
    path = testdata_dir / "jupyter/jupyter.yaml"
    assert render_template(path, {"unused": "value"}) == path.read_text()


def test_unresolved_placeholder(tmp_path: Path) -> None:
    """Test a placeholder without a value fails to render."""
    path = tmp_path / "app.yaml"
    path.write_text("metadata:\n  name: ${name}\n  namespace: ${namespace}\n")
    with pytest.raises(TemplateRenderError, match="namespace"):
        render_template(path, {"name": "app"})


@pytest.mark.parametrize(
    "placeholder", ["namespace", "range", "dict", "lipsum", "cycler", "joiner"]
)
def test_unresolved_builtin_name(tmp_path: Path, placeholder: str) -> None:
    """Test placeholders named like template builtins still need a value."""
    path = tmp_path / "app.yaml"
    path.write_text(f"metadata:\n  name: ${{{placeholder}}}\n")
    with pytest.raises(TemplateRenderError, match=placeholder):
        render_template(path, {"name": "app"})


def test_builtin_name_from_data(tmp_path: Path) -> None:
    """Test template data can use a name that is a template builtin."""
    path = tmp_path / "app.yaml"
    path.write_text("metadata:\n  namespace: ${namespace}\n")
    content = render_template(path, {"namespace": "testbed"})
    assert content == "metadata:\n  namespace: testbed\n"


def test_malformed_template(tmp_path: Path) -> None:
    """Test a template with invalid placeholder syntax."""
    path = tmp_path / "app.yaml"
    path.write_text("metadata:\n  name: ${name\n")
    with pytest.raises(TemplateRenderError, match="Invalid template"):
        render_template(path, {"name": "app"})


def test_template_not_utf8(tmp_path: Path) -> None:
    """Test a template that is not valid UTF-8 fails to render."""
    path = tmp_path / "app.yaml"
    path.write_bytes(b"metadata:\n  name: \xff\xfe\n")
    with pytest.raises(TemplateRenderError, match="not valid UTF-8"):
        render_template(path, {})


def test_missing_template(tmp_path: Path) -> None:
    """Test rendering a template that does not exist."""
    with pytest.raises(TemplateNotFoundError):
        render_template(tmp_path / "missing.yaml", {})


def test_b64encode_filter(tmp_path: Path) -> None:
    """Test encoding values for a Secret."""
    path = tmp_path / "secret.yaml"
    path.write_text("data:\n  password: ${password | b64encode}\n")
    content = render_template(path, {"password": "hunter2"})
    assert content == "data:\n  password: aHVudGVyMg==\n"
