"""Unit tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from langsense.api.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestDetectCommand:
    """Test the detect command."""

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["detect", "--json", "the quick brown fox and the lazy dog"]
        )

        assert result.exit_code == 0
        detections = json.loads(result.stdout)
        assert detections[0]["code"] == "en"
        assert sum(d["confidence"] for d in detections) == 100

    def test_top_option(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["detect", "--json", "-n", "1", "El perro y el gato están en la casa"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"code": "es", "display_name": "Spanish", "flag": "🇪🇸", "confidence": 100}
        ]

    def test_reads_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["detect", "--json"], input="こんにちは\n")

        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["code"] == "ja"

    def test_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["detect", "안녕하세요"])

        assert result.exit_code == 0
        assert "Korean" in result.stdout
        assert "100%" in result.stdout

    def test_nothing_detected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["detect", "12345"])

        assert result.exit_code == 0
        assert "No language detected" in result.stdout

    def test_blank_text(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["detect", "   "])

        assert result.exit_code == 1
        assert "No text given" in result.stdout


class TestVoiceCommand:
    """Test the voice command."""

    def test_detected_voice(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["voice", "El perro y el gato están en la casa"])

        assert result.exit_code == 0
        assert "monica" in result.stdout
        assert "es-ES" in result.stdout

    def test_fallback_voice(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["voice", "--min-confidence", "100", "hola amigo"])

        assert result.exit_code == 0
        assert "aria" in result.stdout
        assert "fallback" in result.stdout


class TestInfoCommands:
    """Test languages and config commands."""

    def test_languages(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["languages"])

        assert result.exit_code == 0
        assert "seoyeon" in result.stdout
        assert "Turkish" in result.stdout

    def test_languages_single_code(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["languages", "--code", "es"])

        assert result.exit_code == 0
        assert "monica" in result.stdout
        assert "aria" not in result.stdout

    def test_languages_unknown_code(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["languages", "--code", "xx"])

        assert result.exit_code == 1
        assert "UNSUPPORTEDLANGUAGEERROR" in result.stdout

    def test_config(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config"])

        assert result.exit_code == 0
        assert "Max Results" in result.stdout
        assert "aria" in result.stdout

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.stdout
