"""Tests for the upspin-get command-line interface."""

import re
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from upspin.cli import app

AUGIE = "augie@upspin.io/Images/Augie/small.jpg"

runner = CliRunner()


@pytest.fixture
def use_tool():
    """Route every Upspin created by the CLI to the given fake."""

    def _use(tool):
        return patch("upspin.tools.create_tool", return_value=tool)

    return _use


class TestGetCommand:
    """Tests for `upspin-get get`."""

    def test_downloads_to_file_name(self, use_tool, fake_tool, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with use_tool(fake_tool):
            result = runner.invoke(app, ["get", AUGIE])

        assert result.exit_code == 0
        assert "Downloaded file small.jpg" in result.output
        assert (tmp_path / "small.jpg").read_bytes() == fake_tool.content

    def test_output_option(self, use_tool, fake_tool, tmp_path):
        out = tmp_path / "augie.jpg"
        with use_tool(fake_tool):
            result = runner.invoke(app, ["get", AUGIE, "--output", str(out)])

        assert result.exit_code == 0
        assert "Downloaded file augie.jpg" in result.output
        assert out.exists()

    def test_not_public_exits_with_error(self, use_tool, make_tool, private_info, tmp_path):
        tool = make_tool(info_output=private_info)
        with use_tool(tool):
            result = runner.invoke(app, ["get", AUGIE, "-o", str(tmp_path / "x.jpg")])

        assert result.exit_code == 1
        assert "is not public" in result.output
        assert not (tmp_path / "x.jpg").exists()

    def test_download_failure_exits_with_error(self, use_tool, make_tool, tmp_path):
        tool = make_tool(get_returncode=1)
        with use_tool(tool):
            result = runner.invoke(app, ["get", AUGIE, "-o", str(tmp_path / "x.jpg")])

        assert result.exit_code == 1
        assert "Could not download" in result.output

    def test_command_option_reaches_config(self, tmp_path):
        """--command selects the executable; a missing one means not public."""
        missing = tmp_path / "missing-upspin"
        result = runner.invoke(app, ["--command", str(missing), "get", AUGIE, "-o", str(tmp_path / "x")])

        assert result.exit_code == 1
        assert "is not public" in result.output


class TestInfoCommand:
    """Tests for `upspin-get info`."""

    def test_shows_parts(self, use_tool, fake_tool):
        with use_tool(fake_tool):
            result = runner.invoke(app, ["info", AUGIE])

        assert result.exit_code == 0
        assert "augie@upspin.io" in result.output
        assert "Images/Augie/small.jpg" in result.output
        assert "small.jpg" in result.output
        assert re.search(r"Public\s*[│|]\s*yes\b", result.output)

    def test_private(self, use_tool, make_tool, private_info):
        with use_tool(make_tool(info_output=private_info)):
            result = runner.invoke(app, ["info", AUGIE])

        assert result.exit_code == 0
        assert re.search(r"Public\s*[│|]\s*no\b", result.output)

    def test_owner_only(self, use_tool, fake_tool):
        with use_tool(fake_tool):
            result = runner.invoke(app, ["info", "justanowner"])

        assert result.exit_code == 0
        assert "justanowner" in result.output


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "get" in result.output
    assert "info" in result.output
