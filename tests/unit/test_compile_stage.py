"""Tests for the SCSS compile stage."""

from pathlib import Path

import pytest

from stylepipe.exceptions import CompilationError, ConfigError
from stylepipe.stages import Asset, CompileStage


def test_compile_flattens_nesting_and_variables():
    stage = CompileStage(compress=True)
    out = stage.transform(b"$w: 10px;\n.a {\n  .b { width: $w; }\n}\n")
    assert out.decode().strip() == ".a .b{width:10px}"


def test_compile_drops_silent_comments():
    stage = CompileStage(compress=True)
    out = stage.transform(b"a{color:red}\n// comment\nb{color:blue}")
    assert out.decode().strip() == "a{color:red}b{color:blue}"


def test_compile_expanded_when_not_compressed():
    stage = CompileStage(compress=False)
    out = stage.transform(b".a { .b { width: 1px; } }").decode()
    assert ".a .b {" in out
    assert "\n" in out.strip()


def test_vendor_helpers_resolve_mixins():
    stage = CompileStage(use=["vendor"], compress=True)
    out = stage.transform(
        b'@import "vendor";\n.box { @include border-radius(3px); }\n'
    ).decode()

    assert "-webkit-border-radius:3px" in out
    assert "-moz-border-radius:3px" in out
    assert "border-radius:3px" in out
    assert "@include" not in out
    assert "@mixin" not in out


@pytest.mark.parametrize(
    "direction, legacy",
    [("to right", "left"), ("to top left", "bottom right"), ("0deg", "90deg")],
)
def test_linear_gradient_converts_prefixed_direction(direction, legacy):
    stage = CompileStage(use=["vendor"])
    source = f'@import "vendor";\n.bar {{ @include linear-gradient({direction}, red, blue); }}\n'
    out = stage.transform(source.encode()).decode()
    flat = " ".join(out.split()).replace(", ", ",")

    assert f"-webkit-linear-gradient({legacy},red,blue)" in flat
    assert f"background-image: linear-gradient({direction},red,blue)" in flat


def test_reset_helpers_resolve_mixins():
    stage = CompileStage(use=["reset"], compress=True)
    out = stage.transform(b'@import "reset";\nul { @include reset-list-style; }\n')
    assert out.decode().strip() == "ul{list-style:none}"


def test_unknown_helper_set_rejected():
    with pytest.raises(ConfigError, match="Unknown helper set 'nib'"):
        CompileStage(use=["nib"])


def test_helper_set_can_be_a_directory(tmp_path):
    helpers = tmp_path / "mixins"
    helpers.mkdir()
    (helpers / "_shout.scss").write_text("@mixin shout { font-weight: bold; }\n")

    stage = CompileStage(use=["mixins"], compress=True, root=tmp_path)
    out = stage.transform(b'@import "shout";\np { @include shout; }\n')
    assert out.decode().strip() == "p{font-weight:bold}"


def test_import_partial_next_to_source(write_source):
    write_source("_colors.scss", "$accent: 5px;\n")
    index = write_source("index.scss", '@import "colors";\n.a { top: $accent; }\n')

    stage = CompileStage(compress=True)
    out = stage.transform(index.read_bytes(), index)
    assert out.decode().strip() == ".a{top:5px}"


def test_imports_inline_depth_first_in_order(write_source):
    write_source("_inner.scss", ".inner { top: 0; }\n")
    write_source("_first.scss", '@import "inner";\n.first { top: 1px; }\n')
    write_source("_second.scss", ".second { top: 2px; }\n")
    index = write_source(
        "index.scss", '@import "first";\n@import "second";\n.index { top: 3px; }\n'
    )

    out = CompileStage(compress=True).transform(index.read_bytes(), index).decode()
    positions = [out.index(sel) for sel in (".inner", ".first", ".second", ".index")]
    assert positions == sorted(positions)


def test_include_paths_are_searched(tmp_path, write_source):
    shared = tmp_path / "shared"
    shared.mkdir()
    (shared / "_base.scss").write_text(".base { left: 0; }\n")
    index = write_source("index.scss", '@import "base";\n')

    stage = CompileStage(compress=True, include_paths=[shared])
    out = stage.transform(index.read_bytes(), index)
    assert out.decode().strip() == ".base{left:0}"


def test_include_css_inlines_css_file(write_source):
    write_source("reset.css", "html {\n  margin: 0;\n}\n")
    index = write_source("index.scss", '@import "reset.css";\n.a { top: 0; }\n')

    out = CompileStage(compress=True, include_css=True).transform(
        index.read_bytes(), index
    ).decode()
    assert "html{margin:0}" in out
    assert "@import" not in out


def test_css_import_left_alone_without_include_css(write_source):
    write_source("reset.css", "html { margin: 0; }\n")
    index = write_source("index.scss", '@import "reset.css";\n.a { top: 0; }\n')

    out = CompileStage(compress=True, include_css=False).transform(
        index.read_bytes(), index
    ).decode()
    assert "@import" in out
    assert "reset.css" in out
    assert "html{margin:0}" not in out


def test_include_css_missing_file_is_compilation_error(write_source):
    index = write_source("index.scss", '.a { top: 0; }\n@import "nowhere.css";\n')

    with pytest.raises(CompilationError) as exc_info:
        CompileStage(include_css=True).transform(index.read_bytes(), index)

    assert "nowhere.css" in exc_info.value.message
    assert exc_info.value.line == 2
    assert exc_info.value.filename == str(index)


def test_missing_import_is_compilation_error():
    with pytest.raises(CompilationError) as exc_info:
        CompileStage().transform(b'@import "missing";\n')

    assert "missing" in exc_info.value.message
    assert exc_info.value.line == 1


def test_syntax_error_reports_location(write_source):
    index = write_source("index.scss", ".a {\n  top: 0;\n")

    with pytest.raises(CompilationError) as exc_info:
        CompileStage().transform(index.read_bytes(), index)

    assert exc_info.value.line is not None
    assert str(index) in str(exc_info.value)


def test_unknown_mixin_is_compilation_error():
    with pytest.raises(CompilationError, match="nope"):
        CompileStage().transform(b".a { @include nope; }\n")


def test_non_utf8_source_is_compilation_error():
    with pytest.raises(CompilationError, match="UTF-8"):
        CompileStage().transform(b"\xff\xfe.a { top: 0; }")


def test_apply_renames_to_css():
    stage = CompileStage(compress=True)
    [asset] = stage.apply([Asset(path=Path("style/index.scss"), contents=b"a { top: 0; }")])

    assert asset.path == Path("style/index.css")
    assert asset.contents.strip() == b"a{top:0}"


def test_describe_uses_config_names():
    stage = CompileStage(use=["vendor"], compress=True, include_css=True)
    info = stage.describe()
    assert info["use"] == ["vendor"]
    assert info["include css"] is True
