"""
Tests for CLI commands — resolve, supported, installers, global options.
"""

import json
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from modinstall.adapters.python_probe import SubprocessPythonProcess
from modinstall.main import cli
from modinstall.scripts import SCRIPTS_DIR


@pytest.fixture
def importable(monkeypatch):
    """Control which modules the probed interpreter reports as importable."""
    modules: set[str] = {"pip", "ensurepip"}

    def fake_probe(self, name):
        return name in modules

    monkeypatch.setattr(SubprocessPythonProcess, "is_module_installed", fake_probe)
    return modules


@pytest.fixture
def config(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        http:
          proxy: http://proxy:8080
        python:
          interpreter: /opt/venv/bin/python
          version: 3.12.1
          env_type: venv
    """)
    path = tmp_path / ".modinstall.yml"
    path.write_text(content)
    return path


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch) -> Path:
    """Run from an empty directory so no settings file is picked up."""
    work = tmp_path / "empty"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "resolve" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_invalid_config(self, tmp_path: Path):
        bad = tmp_path / "bad.yml"
        bad.write_text("- not a mapping\n")
        result = CliRunner().invoke(cli, ["--config", str(bad), "installers"])
        assert result.exit_code == 1
        assert "Expected a YAML mapping" in result.output

    def test_missing_config(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ["--config", str(tmp_path / "nope.yml"), "installers"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestResolveCommand:
    def test_module_with_proxy(self, config: Path, importable):
        result = CliRunner().invoke(cli, ["--config", str(config), "resolve", "requests"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == (
            "/opt/venv/bin/python -m pip --proxy http://proxy:8080 install -U requests"
        )

    def test_json(self, config: Path, importable):
        result = CliRunner().invoke(
            cli, ["--config", str(config), "resolve", "requests", "--reinstall", "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["module_name"] == "pip"
        assert data["exec_path"] is None
        assert data["args"] == [
            "--proxy", "http://proxy:8080", "install", "-U", "--force-reinstall", "requests",
        ]
        assert data["argv"][:3] == ["/opt/venv/bin/python", "-m", "pip"]

    def test_explicit_python(self, isolated, importable):
        result = CliRunner().invoke(
            cli, ["resolve", "requests", "--python", "/usr/bin/python3", "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["args"] == ["install", "-U", "requests"]
        assert data["argv"][0] == "/usr/bin/python3"

    def test_pip_with_ensurepip(self, isolated, importable):
        importable.discard("pip")
        result = CliRunner().invoke(
            cli, ["resolve", "pip", "--python", "/usr/bin/python3", "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["module_name"] == "ensurepip"
        assert data["args"] == []
        assert data["argv"] == ["/usr/bin/python3", "-m", "ensurepip"]

    def test_pip_without_ensurepip(self, isolated, importable):
        importable.clear()
        result = CliRunner().invoke(
            cli,
            [
                "resolve", "pip",
                "--python", "/usr/bin/python3",
                "--python-version", "3.8.10",
                "--env-type", "system",
                "--json",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["exec_path"] == "/usr/bin/python3"
        assert data["args"] == [str(SCRIPTS_DIR / "get-pip.py")]

    def test_pip_without_interpreter_falls_back(self, isolated, importable):
        importable.clear()
        result = CliRunner().invoke(cli, ["resolve", "pip", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["exec_path"] == "python"

    def test_no_installer(self, isolated, importable):
        importable.clear()
        result = CliRunner().invoke(cli, ["resolve", "requests", "--python", "/usr/bin/python3"])
        assert result.exit_code == 1
        assert "No installer supports" in result.output

    def test_no_installer_json(self, isolated, importable):
        importable.clear()
        result = CliRunner().invoke(
            cli, ["resolve", "requests", "--python", "/usr/bin/python3", "--json"]
        )
        assert result.exit_code == 1
        assert "No installer supports" in json.loads(result.output)["error"]

    def test_product_name(self, isolated, importable):
        result = CliRunner().invoke(
            cli, ["resolve", "torchProfilerInstallName", "--python", "/py", "--json"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["args"][-1] == "torch-tb-profiler"


class TestSupportedCommand:
    def test_supported(self, config: Path, importable):
        result = CliRunner().invoke(cli, ["--config", str(config), "supported", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["Pip"]["supported"] is True

    def test_unsupported(self, isolated, importable):
        importable.clear()
        result = CliRunner().invoke(cli, ["supported", "--python", "/py"])
        assert result.exit_code == 0, result.output
        assert "Pip" in result.output


class TestInstallersCommand:
    def test_list(self, isolated):
        result = CliRunner().invoke(cli, ["installers"])
        assert result.exit_code == 0
        assert "Pip" in result.output

    def test_json(self, isolated):
        result = CliRunner().invoke(cli, ["installers", "--json"])
        assert json.loads(result.output) == [
            {"name": "Pip", "display_name": "Pip", "type": "Pip", "priority": 0}
        ]
