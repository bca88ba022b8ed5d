"""Tests for the CLI entry points."""

import json

from click.testing import CliRunner

from appshelf.cli.main import cli


def write_index(path):
    records = [
        {
            "id": "old-1",
            "name": "Alpha",
            "version": "1.0",
            "identifier": "com.example.alpha",
            "build": "1",
            "date": "2023-01-01T00:00:00Z",
            "size": 2048,
            "noneIcon": False,
            "type": 0,
        },
        {
            "id": "new-2",
            "name": "Beta",
            "version": "2.0",
            "identifier": "com.example.beta",
            "build": "9",
            "channel": "beta",
            "date": "2024-01-01T00:00:00+00:00",
            "size": 3 * 1024 * 1024 + 1,
            "noneIcon": True,
            "type": 1,
            "storageName": "b.apk",
        },
    ]
    path.write_text(json.dumps(records))
    return path


class TestCLI:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "appshelf" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_classify(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["classify", "App.IPA", "demo.apk", "notes.txt"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["App.IPA\tIPA", "demo.apk\tAPK", "notes.txt\tUNKNOWN"]

    def test_name(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["name", "--file", "App.ipa", "--identifier", "com.example.app", "--version", "1.2.0", "--build", "42"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["package"] == f"com.example.app_1.2.0(42)_{data['id']}.ipa"
        assert data["icon"] == f"com.example.app/{data['id']}.png"

    def test_name_with_channel_and_no_icon(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["name", "-f", "x.apk", "-i", "com.x", "--version", "3", "-b", "7", "-c", "beta", "--no-icon"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["package"] == f"com.x_3(7)_beta_{data['id']}.apk"
        assert data["icon"] == ""

    def test_name_rejects_unknown_kind(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["name", "--file", "x.zip", "--identifier", "com.x"])
        assert result.exit_code == 2
        assert "not an .ipa or .apk" in result.output

    def test_list(self, tmp_path):
        index = write_index(tmp_path / "index.json")
        runner = CliRunner()
        result = runner.invoke(cli, ["list", str(index)])
        assert result.exit_code == 0, result.output
        assert "Beta" in result.output
        assert "Alpha" in result.output
        assert result.output.index("Beta") < result.output.index("Alpha")

    def test_list_from_env(self, tmp_path):
        index = write_index(tmp_path / "index.json")
        runner = CliRunner()
        result = runner.invoke(cli, ["list", "--grouped"], env={"APPSHELF_INDEX": str(index)})
        assert result.exit_code == 0, result.output
        assert "android" in result.output
        assert "ios" in result.output

    def test_list_invalid_index(self, tmp_path):
        index = tmp_path / "broken.json"
        index.write_text(json.dumps([{"name": "no id"}]))
        runner = CliRunner()
        result = runner.invoke(cli, ["list", str(index)])
        assert result.exit_code == 1
        assert "Invalid index" in result.output
