"""
Integration tests for scripts/process_portfolio.py.

Drives the typer app against a portfolio directory in tmp_path.
"""

import importlib.util
import json
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "process_portfolio.py"


@pytest.fixture
def cli(tmp_path, monkeypatch):
    spec = importlib.util.spec_from_file_location("process_portfolio", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    yield module
    # The commands point loguru at CliRunner's streams; restore a normal sink
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def portfolio_dir(tmp_path):
    content = tmp_path / "portfolio"
    content.mkdir()
    (content / "portfolio.json").write_text('{"name": "Ada", "title": "Analyst"}')
    (content / "about.md").write_text("---\nrole: Analyst\n---\n# About\nHello")
    (content / "skills.yaml").write_text("- mathematics\n- poetry\n")
    (content / "avatar.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\xff")
    return content


@pytest.mark.integration
def test_process_writes_bundle(cli, portfolio_dir, tmp_path):
    output = tmp_path / "bundle.json"
    result = CliRunner().invoke(
        cli.app, ["process", str(portfolio_dir), "--template", "modern", "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    bundle = json.loads(output.read_text())
    assert bundle["metadata"]["templateId"] == "modern"
    assert bundle["data"]["hero"]["title"] == "Analyst"
    assert "<h1>About</h1>" in bundle["componentProps"]["about"]["content"]
    assert bundle["componentProps"]["skills"]["skills"] == ["mathematics", "poetry"]
    assert list((tmp_path / "logs").glob("process_*/compose.log"))


@pytest.mark.integration
def test_process_empty_directory_fails(cli, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    result = CliRunner().invoke(cli.app, ["process", str(empty)])

    assert result.exit_code == 1


@pytest.mark.integration
def test_templates_lists_builtins(cli):
    result = CliRunner().invoke(cli.app, ["templates"])

    assert result.exit_code == 0
    for template_id in ("default", "minimal", "modern", "classic"):
        assert template_id in result.output


@pytest.mark.integration
def test_validate_reports_invalid_templates(cli, tmp_path):
    templates_file = tmp_path / "custom.yaml"
    templates_file.write_text(
        "good:\n"
        "  name: Good\n"
        "  sections: [about]\n"
        "  components:\n"
        "    about: About\n"
        "bad:\n"
        "  name: Bad\n"
    )
    result = CliRunner().invoke(cli.app, ["validate", str(templates_file)])

    assert result.exit_code == 1
    assert "1/2 template(s) invalid" in result.output


@pytest.mark.integration
def test_read_repository_files_skips_binary(cli, portfolio_dir):
    names = [repo_file.name for repo_file in cli.read_repository_files(portfolio_dir)]

    assert "avatar.png" not in names
    assert "about.md" in names
