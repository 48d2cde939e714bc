"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from stylepipe.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["-C", str(project), "build"])  # returns click.Result
        result = invoke(["explain", "default", "--format", "json"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def project(tmp_path):
    """Provide a project laid out like the built-in default task.

    Creates:
        tmp_path/project/style/index.scss     - Entry stylesheet
        tmp_path/project/style/_buttons.scss  - Partial pulled in by @import
        tmp_path/project/style/reset.css      - Plain CSS pulled in by @import
    """
    root = tmp_path / "project"
    style = root / "style"
    style.mkdir(parents=True)

    (style / "index.scss").write_text(
        '@import "vendor";\n'
        '@import "reset.css";\n'
        '@import "buttons";\n'
        "\n"
        "/* layout */\n"
        "$gutter: 12px;\n"
        ".page {\n"
        "  padding: $gutter;\n"
        "  .title { margin: 0 0 $gutter; }\n"
        "}\n",
        encoding="utf-8",
    )
    (style / "_buttons.scss").write_text(
        ".btn {\n"
        "  @include border-radius(4px);\n"
        "  // silent comment\n"
        "  cursor: pointer;\n"
        "}\n",
        encoding="utf-8",
    )
    (style / "reset.css").write_text(
        "html, body {\n  margin: 0;\n}\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def write_source(tmp_path):
    """Write a source file under tmp_path/src and return its path."""

    src_dir = tmp_path / "src"
    src_dir.mkdir(exist_ok=True)

    def _write(name: str, text: str) -> Path:
        path = src_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
