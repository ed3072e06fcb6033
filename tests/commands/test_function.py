"""Tests for the function CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from ruamel.yaml import YAML

from riffcli.cli import cli


def _manifests(output: str) -> list[dict]:
    return json.loads(output)["data"]["manifests"]


@pytest.mark.usefixtures("_isolated_config")
class TestFunctionCreate:
    def test_create_with_image(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "function", "create", "square", "--image", "acme/square:1"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "create_function"
        assert data["data"]["namespace"] == "default"
        (service,) = data["data"]["manifests"]
        assert service["kind"] == "Service"
        assert service["metadata"] == {"name": "square", "namespace": "default"}
        container = service["spec"]["runLatest"]["configuration"]["revisionTemplate"]["spec"]
        assert container["container"]["image"] == "acme/square:1"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["function", "create", "square", "--image", "acme/sq"])
        assert result.exit_code == 0, result.output
        assert "OK" in result.output
        assert "create_function" in result.output
        assert "Service" in result.output

    def test_yaml_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["function", "create", "square", "--image", "acme/sq", "--yaml"]
        )
        assert result.exit_code == 0, result.output
        data = YAML(typ="safe").load(result.output)
        assert data["data"]["manifests"][0]["kind"] == "Service"

    def test_git_repo_builds_and_derives_image(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "function",
                "create",
                "square",
                "--git-repo",
                "https://github.com/acme/square",
                "--git-revision",
                "v1",
            ],
        )
        assert result.exit_code == 0, result.output
        configuration = _manifests(result.output)[0]["spec"]["runLatest"]["configuration"]
        assert configuration["build"]["source"]["git"] == {
            "url": "https://github.com/acme/square",
            "revision": "v1",
        }
        assert configuration["revisionTemplate"]["spec"]["container"]["image"] == (
            "dev.local/default/square"
        )

    def test_input_channel_shares_namespace(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "function",
                "create",
                "square",
                "--image",
                "acme/sq",
                "--input",
                "numbers",
                "--namespace",
                "demo",
            ],
        )
        assert result.exit_code == 0, result.output
        service, channel, subscription = _manifests(result.output)
        assert service["metadata"]["namespace"] == "demo"
        assert channel["kind"] == "Channel"
        assert channel["metadata"] == {"name": "numbers", "namespace": "demo"}
        assert subscription["spec"] == {"channel": "numbers", "subscriber": "square"}
        assert subscription["metadata"]["namespace"] == "demo"

    def test_namespace_resets_between_invocations(self, cli_runner: CliRunner) -> None:
        first = cli_runner.invoke(
            cli, ["--json", "function", "create", "a", "--image", "x", "-n", "demo"]
        )
        second = cli_runner.invoke(cli, ["--json", "function", "create", "b", "--image", "x"])
        assert json.loads(first.output)["data"]["namespace"] == "demo"
        assert json.loads(second.output)["data"]["namespace"] == "default"

    # --- validation failures ---

    def test_invalid_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["function", "create", "My_Func", "--image", "x"])
        assert result.exit_code == 2
        assert "DNS-1123 subdomain" in result.output

    def test_name_with_trailing_newline_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["function", "create", "my-service\n", "--image", "x"])
        assert result.exit_code == 2
        assert "DNS-1123 subdomain" in result.output

    def test_namespace_with_trailing_newline_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "function", "create", "square", "--image", "x", "-n", "ns\n"]
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_NAMESPACE"

    def test_needs_image_or_git_repo(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["function", "create", "square"])
        assert result.exit_code == 2
        assert "at least one of --image, --git-repo must be set" in result.output

    def test_git_revision_requires_git_repo(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["function", "create", "square", "--image", "x", "--git-revision", "v1"]
        )
        assert result.exit_code == 2
        assert "at least one of --git-repo must be set" in result.output

    def test_json_and_yaml_conflict(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "function", "create", "square", "--image", "x", "--yaml"]
        )
        assert result.exit_code == 2
        assert "at most one of --json, --yaml must be set" in result.output

    def test_invalid_namespace_is_service_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "function", "create", "square", "--image", "x", "-n", "Bad.NS"]
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_NAMESPACE"

    def test_invalid_channel_is_service_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "function", "create", "square", "--image", "x", "--input", "Bad_Chan"],
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_CHANNEL"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["function", "create", "--examples"])
        assert result.exit_code == 0
        assert "riff function create square" in result.output


class TestFunctionCreateConfig:
    def test_namespace_from_toml(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("RIFF_CONFIG", raising=False)
        (tmp_path / "riff.toml").write_text(
            '[function]\nnamespace = "from-toml"\nregistry = "registry.example"\n'
        )
        result = cli_runner.invoke(
            cli, ["--json", "function", "create", "square", "--git-repo", "https://x"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["namespace"] == "from-toml"
        assert data["image"] == "registry.example/from-toml/square"

    def test_explicit_namespace_beats_toml(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("RIFF_CONFIG", raising=False)
        (tmp_path / "riff.toml").write_text('[function]\nnamespace = "from-toml"\n')
        result = cli_runner.invoke(
            cli, ["--json", "function", "create", "square", "--image", "x", "-n", "cli"]
        )
        assert json.loads(result.output)["data"]["namespace"] == "cli"
