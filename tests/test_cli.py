"""Tests for the showcase CLI commands."""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from showcase.cli import app
from showcase.config.loader import load_config

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """configure_logging() replaces root handlers; put pytest's back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def patched_source(mock_source):
    with patch("showcase.cli.create_source", return_value=mock_source):
        yield mock_source


@pytest.fixture
def bracketed_source(make_source, sample_tree, sample_files):
    """Project text that looks like Rich markup."""
    files = {
        url: text.replace("A fast thing.", "Port of [/r/python] bot").replace("Docker", "[/docker]")
        for url, text in sample_files.items()
    }
    source = make_source(sample_tree, files)
    with patch("showcase.cli.create_source", return_value=source):
        yield source


def _invoke(config_file, *args):
    return runner.invoke(app, ["--config", str(config_file), *args])


class TestProjectsCommand:
    def test_table(self, config_file, patched_source):
        result = _invoke(config_file, "projects")
        assert result.exit_code == 0, result.output
        assert "Alpha" in result.output
        assert "Beta" in result.output
        patched_source.aclose.assert_awaited_once()

    def test_json(self, config_file, patched_source):
        result = _invoke(config_file, "projects", "--json")
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [p["name"] for p in payload] == ["Alpha", "Beta"]
        assert payload[0]["href"] == "https://alpha.example.com"

    def test_tag_filter(self, config_file, patched_source):
        result = _invoke(config_file, "projects", "--json", "--tag", "python")
        payload = json.loads(result.output)
        assert [p["name"] for p in payload] == ["Alpha"]

    def test_status_filter(self, config_file, patched_source):
        result = _invoke(config_file, "projects", "--json", "--status", "In Progress")
        payload = json.loads(result.output)
        assert [p["name"] for p in payload] == ["Beta"]

    def test_bracketed_tags_in_table(self, config_file, bracketed_source):
        result = _invoke(config_file, "projects")
        assert result.exit_code == 0, result.output
        assert "[/docker]" in result.output

    def test_no_matches(self, config_file, patched_source):
        result = _invoke(config_file, "projects", "--search", "zzz")
        assert result.exit_code == 0
        assert "No projects match" in result.output

    def test_missing_config(self, tmp_path):
        result = _invoke(tmp_path / "missing.yaml", "projects")
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_missing_github_user_fails_before_remote_calls(self, tmp_path, patched_source):
        path = tmp_path / "showcase.yaml"
        path.write_text('githubRepo: "projects"\n')
        with patch("showcase.cli.create_source") as factory:
            result = _invoke(path, "projects")
        assert result.exit_code == 1
        factory.assert_not_called()
        patched_source.list_directory.assert_not_awaited()


class TestShowCommand:
    def test_bare_name(self, config_file, patched_source):
        result = _invoke(config_file, "show", "Alpha")
        assert result.exit_code == 0, result.output
        assert "Completed/Alpha" in result.output
        assert "A fast thing." in result.output

    def test_bracketed_text_printed_literally(self, config_file, bracketed_source):
        result = _invoke(config_file, "show", "Alpha")
        assert result.exit_code == 0, result.output
        assert "Port of [/r/python] bot" in result.output
        assert "[/docker]" in result.output

    def test_unknown_project(self, config_file, patched_source):
        result = _invoke(config_file, "show", "Nope")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestTagsCommand:
    def test_groups(self, config_file, patched_source):
        result = _invoke(config_file, "tags")
        assert result.exit_code == 0, result.output
        assert "Languages" in result.output
        assert "Frameworks" in result.output
        assert "Other" in result.output
        assert "Docker" in result.output

    def test_bracketed_tag_in_tree(self, config_file, bracketed_source):
        result = _invoke(config_file, "tags")
        assert result.exit_code == 0, result.output
        assert "[/docker]" in result.output


class TestRenderCommand:
    def test_writes_site(self, config_file, patched_source, tmp_path):
        out = tmp_path / "out"
        result = _invoke(config_file, "render", "--output", str(out))
        assert result.exit_code == 0, result.output
        html = (out / "index.html").read_text()
        assert "Alpha" in html
        assert "octo/projects" in html
        assert (out / "projects.json").is_file()

    def test_dry_run(self, config_file, patched_source, tmp_path):
        out = tmp_path / "out"
        result = _invoke(config_file, "render", "--output", str(out), "--dry-run")
        assert result.exit_code == 0, result.output
        assert "dry run" in result.output
        assert not out.exists()


class TestConfigCommands:
    def test_show(self, config_file):
        result = _invoke(config_file, "config", "show")
        assert result.exit_code == 0, result.output
        assert "githubUser" in result.output

    def test_init_creates_loadable_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0, result.output
        assert load_config(str(tmp_path / "showcase.yaml")).github_repo == "projects"

    def test_init_refuses_overwrite(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "showcase.yaml").write_text('githubUser: "mine"\n')
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "mine" in (tmp_path / "showcase.yaml").read_text()

    def test_init_force(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "showcase.yaml").write_text('githubUser: "mine"\n')
        result = runner.invoke(app, ["config", "init", "--force"])
        assert result.exit_code == 0
        assert "your-github-user" in (tmp_path / "showcase.yaml").read_text()
