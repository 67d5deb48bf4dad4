"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from citeformats import __version__
from citeformats.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def record_file(tmp_path):
    path = tmp_path / "record.json"
    path.write_text(
        json.dumps(
            {
                "authors": ["Author, The First"],
                "title": "Title",
                "root_dataverse_name": "Dataverse",
                "year": "2019",
                "pid_of_dataset": "doi:10.18150/ZENON",
            }
        )
    )
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("CITEFORMATS_LOCALE", raising=False)
    monkeypatch.delenv("CITEFORMATS_BUNDLE_DIR", raising=False)
    monkeypatch.chdir(tmp_path)


class TestRenderCommand:
    """Test the render command."""

    def test_render_citation(self, runner, record_file):
        result = runner.invoke(cli, ["render", str(record_file)])

        assert result.exit_code == 0, result.output
        assert result.output == (
            "Author, The First: Title [data]. Dataverse [publisher], 2019. "
            "https://doi.org/10.18150/ZENON\n"
        )

    def test_render_bibtex(self, runner, record_file):
        result = runner.invoke(cli, ["render", str(record_file), "-f", "bibtex"])

        assert result.exit_code == 0
        assert "@misc{ZENON_2019," in result.output
        assert "doi = {10.18150/ZENON}," in result.output

    def test_render_polish(self, runner, record_file):
        result = runner.invoke(cli, ["render", str(record_file), "--locale", "pl"])

        assert result.exit_code == 0
        assert "Title [dane]" in result.output

    def test_render_to_file(self, runner, record_file, tmp_path):
        output = tmp_path / "out.ris"

        result = runner.invoke(
            cli, ["render", str(record_file), "-f", "ris", "-o", str(output)]
        )

        assert result.exit_code == 0
        content = output.read_bytes().decode("utf-8")
        assert content.startswith("TY  - DATA\r\n")
        assert content.endswith("\r\nER  - ")

    def test_render_unknown_locale(self, runner, record_file):
        result = runner.invoke(cli, ["render", str(record_file), "--locale", "xx"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_render_invalid_record(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"title": "Only title"}')

        result = runner.invoke(cli, ["render", str(path)])

        assert result.exit_code == 1
        assert "Invalid citation record" in result.output

    def test_locale_from_config(self, runner, record_file, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("default_locale: pl\n")

        result = runner.invoke(cli, ["--config", str(config), "render", str(record_file)])

        assert result.exit_code == 0
        assert "[wydawca]" in result.output


class TestInfoCommands:
    """Test informational commands."""

    def test_formats(self, runner):
        result = runner.invoke(cli, ["--no-color", "formats"])

        assert result.exit_code == 0
        assert "text/x-bibtex" in result.output
        assert "endnote" in result.output

    def test_labels(self, runner):
        result = runner.invoke(cli, ["--no-color", "labels", "--locale", "pl"])

        assert result.exit_code == 0
        assert "[nazwa pliku]" in result.output
        assert "Available locales: en, pl" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
