"""End-to-end tests for running configured tasks."""

import json

import pytest

from stylepipe.config import default_config, load
from stylepipe.exceptions import BuildIOError, ConfigError
from stylepipe.service import explain_task, run_task


def test_default_task_builds_style_css(project):
    written = run_task(default_config(), "default", project)

    assert written == [project.resolve() / "style.css"]
    css = (project / "style.css").read_text(encoding="utf-8")
    assert css.startswith("html,body{margin:0}")
    assert ".btn{" in css


def test_unknown_task_raises_key_error(project):
    with pytest.raises(KeyError):
        run_task(default_config(), "nope", project)


def test_config_file_paths_resolve_against_its_directory(project, tmp_path):
    (project / "dist").mkdir()
    (project / "style" / "print.scss").write_text("body { margin: 1px; }\n")
    config_path = project / "stylepipe.json"
    config_path.write_text(
        json.dumps(
            {
                "version": "1",
                "name": "site",
                "tasks": [
                    {
                        "name": "bundle",
                        "sources": ["style/print.scss", "style/index.scss"],
                        "destination": "dist",
                        "stages": [
                            {"type": "compile", "use": ["vendor"], "compress": True, "include css": True},
                            {"type": "minify"},
                            {"type": "concat", "filename": "all.css", "separator": "\n"},
                        ],
                    }
                ],
            }
        )
    )

    # project root argument is ignored when the config has a backing file
    written = run_task(load(config_path), "bundle", tmp_path)

    assert written == [project.resolve() / "dist" / "all.css"]
    first, second = (project / "dist" / "all.css").read_text().split("\n", 1)
    assert first == "body{margin:1px}"
    assert second.startswith("html,body{margin:0}")


def test_glob_with_no_match_raises(project):
    config = default_config()
    config.tasks[0].sources = ["style/*.less"]
    with pytest.raises(BuildIOError):
        run_task(config, "default", project)


def test_unknown_helper_set_raises_config_error(project):
    config = default_config()
    config.tasks[0].stages[0].use = ["nib"]
    with pytest.raises(ConfigError):
        run_task(config, "default", project)
    assert not (project / "style.css").exists()


def test_explain_resolves_plan(project):
    plan = explain_task(default_config(), "default", project)

    assert plan.task == "default"
    assert plan.sources == [str(project.resolve() / "style" / "index.scss")]
    assert plan.destination == str(project.resolve())
    assert [s["type"] for s in plan.stages] == ["compile", "minify", "concat"]
    assert plan.stages[1]["keepSpecialComments"] == 0
    assert plan.stages[2]["filename"] == "style.css"
    assert not (project / "style.css").exists()
