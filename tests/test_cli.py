"""CLI命令测试"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dockalias import cli_utils
from dockalias.cli import app
from dockalias.managers import image_manager

from .fakes import FakeRuntime, container_line, image_line

runner = CliRunner()

CATALOG = "\n".join(
    [
        image_line("abc123", "ubuntu", "latest"),
        image_line("def456", "ubuntu", "trusty"),
        image_line("fff000", "alpine", "3.19"),
    ]
)


@pytest.fixture
def catalog(runtime: FakeRuntime) -> FakeRuntime:
    runtime.respond("images", stdout=CATALOG)
    return runtime


def test_rmi_by_tokens(catalog: FakeRuntime) -> None:
    result = runner.invoke(app, ["rmi", "ubuntu:trusty", "alpine", "missing"])

    assert result.exit_code == 0, result.output
    assert catalog.invoked("rmi") == [["rmi", "def456", "fff000"]]


def test_rmi_without_tokens_takes_all_path(catalog: FakeRuntime, monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):
        raise AssertionError("selector must not be used without tokens")

    monkeypatch.setattr(image_manager, "resolve", fail)

    result = runner.invoke(app, ["rmi", "--yes"])

    assert result.exit_code == 0, result.output
    assert catalog.invoked("rmi") == [["rmi", "abc123", "def456", "fff000"]]


def test_rmi_all_asks_for_confirmation(catalog: FakeRuntime) -> None:
    result = runner.invoke(app, ["rmi"], input="n\n")

    assert result.exit_code == 0
    assert "操作已取消" in result.output
    assert catalog.invoked("images") == []
    assert catalog.invoked("rmi") == []

    result = runner.invoke(app, ["rmi", "--force"], input="y\n")
    assert result.exit_code == 0, result.output
    assert catalog.invoked("rmi") == [["rmi", "--force", "abc123", "def456", "fff000"]]


def test_rmi_confirmation_disabled_in_config(catalog: FakeRuntime, isolated_env: Path) -> None:
    isolated_env.write_text(json.dumps({"confirm_destructive": False}))

    result = runner.invoke(app, ["rmi"])

    assert result.exit_code == 0, result.output
    assert len(catalog.invoked("rmi")) == 1


def test_rmi_no_match_is_silent_success(catalog: FakeRuntime) -> None:
    result = runner.invoke(app, ["rmi", "ubuntu:xenial"])

    assert result.exit_code == 0
    assert catalog.invoked("rmi") == []


def test_rmi_propagates_runtime_exit_code(catalog: FakeRuntime) -> None:
    catalog.respond("rmi", returncode=2)

    result = runner.invoke(app, ["rmi", "ubuntu"])

    assert result.exit_code == 2


def test_query_failure_writes_stderr_verbatim(runtime: FakeRuntime) -> None:
    runtime.respond("images", returncode=125, stderr="Cannot connect to the Docker daemon\n")

    result = runner.invoke(app, ["images"])

    assert result.exit_code == 125
    assert "Cannot connect to the Docker daemon" in result.output


def test_images_table(catalog: FakeRuntime) -> None:
    result = runner.invoke(app, ["images"])

    assert result.exit_code == 0, result.output
    assert "REPOSITORY" in result.output
    assert "alpine" in result.output
    assert "fff000" in result.output


def test_ps_table_uses_configured_columns(runtime: FakeRuntime, isolated_env: Path) -> None:
    isolated_env.write_text(json.dumps({"display": {"container_columns": ["names", "bogus"]}}))
    runtime.respond("ps", stdout=container_line("c1", "web"))

    result = runner.invoke(app, ["ps", "-a"])

    assert result.exit_code == 0, result.output
    assert "NAMES" in result.output
    assert "web" in result.output
    assert "IMAGE" not in result.output
    assert runtime.invoked("ps") == [["ps", "--all", "--format", "{{json .}}"]]


def test_ps_raw_forwards(runtime: FakeRuntime) -> None:
    result = runner.invoke(app, ["ps", "--raw"])

    assert result.exit_code == 0
    assert runtime.invoked("ps") == [["ps"]]


def test_passthrough_keeps_unknown_options_and_exit_code(runtime: FakeRuntime) -> None:
    runtime.respond("run", returncode=3)

    result = runner.invoke(app, ["x", "run", "--rm", "-it", "alpine", "sh"])

    assert result.exit_code == 3
    assert runtime.invoked("run") == [["run", "--rm", "-it", "alpine", "sh"]]


def test_passthrough_forwards_help_and_double_dash(runtime: FakeRuntime) -> None:
    result = runner.invoke(app, ["x", "ps", "--help"])

    assert result.exit_code == 0, result.output
    assert runtime.invoked("ps") == [["ps", "--help"]]
    assert "Usage" not in result.output

    runner.invoke(app, ["x", "run", "alpine", "sh", "-c", "--", "echo"])
    assert runtime.invoked("run") == [["run", "alpine", "sh", "-c", "--", "echo"]]


def test_exec_command_keeps_help_and_tty_flags(runtime: FakeRuntime) -> None:
    result = runner.invoke(app, ["exec", "web", "ls", "--help"])
    assert result.exit_code == 0, result.output

    runner.invoke(app, ["exec", "-T", "web", "grep", "-T", "x"])

    assert runtime.invoked("exec") == [
        ["exec", "-it", "web", "ls", "--help"],
        ["exec", "web", "grep", "-T", "x"],
    ]


def test_exec_help_still_shown_before_container(runtime: FakeRuntime) -> None:
    result = runner.invoke(app, ["exec", "--help"])

    assert result.exit_code == 0
    assert runtime.calls == []


def test_exec_with_container(runtime: FakeRuntime) -> None:
    result = runner.invoke(app, ["exec", "web", "ls", "-la"])

    assert result.exit_code == 0, result.output
    assert runtime.invoked("exec") == [["exec", "-it", "web", "ls", "-la"]]


def test_exec_picks_single_running_container(runtime: FakeRuntime) -> None:
    runtime.respond("ps", stdout=container_line("c1", "web"))

    result = runner.invoke(app, ["exec", "--no-tty"])

    assert result.exit_code == 0, result.output
    assert runtime.invoked("exec") == [["exec", "web", "sh"]]


def test_exec_without_running_containers(runtime: FakeRuntime) -> None:
    result = runner.invoke(app, ["exec"])

    assert result.exit_code == 1
    assert runtime.invoked("exec") == []


def test_runtime_commands_refused_when_unavailable(
    runtime: FakeRuntime, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("dockalias.utils.shutil.which", lambda name: None)

    result = runner.invoke(app, ["images"])

    assert result.exit_code == 1
    assert runtime.calls == []


def test_force_flag_opens_gate(runtime: FakeRuntime, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("dockalias.utils.shutil.which", lambda name: None)
    monkeypatch.setenv("DOCKALIAS_FORCE", "1")

    result = runner.invoke(app, ["df"])

    assert result.exit_code == 0, result.output
    assert runtime.invoked("system") == [["system", "df"]]


def test_check(runtime: FakeRuntime, monkeypatch: pytest.MonkeyPatch) -> None:
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "docker" in result.output

    monkeypatch.setattr("dockalias.utils.shutil.which", lambda name: None)
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 1


def test_shell_init_prints_aliases(runtime: FakeRuntime) -> None:
    result = runner.invoke(app, ["shell-init", "bash"])

    assert result.exit_code == 0
    assert "alias drmi='dkr rmi'" in result.output


def test_shell_init_silent_when_runtime_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("dockalias.utils.shutil.which", lambda name: None)

    result = runner.invoke(app, ["shell-init", "bash"])

    assert result.exit_code == 0
    assert result.output == ""


def test_config_show_and_init(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCKALIAS_RUNTIME", "podman")

    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert json.loads(result.output)["runtime"]["binary"] == "podman"

    result = runner.invoke(app, ["config", "--init"])
    assert result.exit_code == 0
    assert isolated_env.exists()

    result = runner.invoke(app, ["config", "--init"])
    assert result.exit_code == 1


def test_invalid_config_reported(runtime: FakeRuntime, isolated_env: Path) -> None:
    isolated_env.write_text("[]")

    result = runner.invoke(app, ["images"])

    assert result.exit_code == 1
    assert runtime.calls == []


def test_context_reset_per_invocation(runtime: FakeRuntime, monkeypatch: pytest.MonkeyPatch) -> None:
    runner.invoke(app, ["df"])
    first = cli_utils.RuntimeContext.get_instance()
    monkeypatch.setenv("DOCKALIAS_RUNTIME", "podman")

    runner.invoke(app, ["df"])

    assert cli_utils.RuntimeContext.get_instance() is not first
    assert runtime.calls[-1] == ["podman", "system", "df"]


def test_check_reports_daemon_failure(runtime: FakeRuntime) -> None:
    runtime.respond("version", returncode=1, stderr="Cannot connect to the Docker daemon\n")

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 1
    assert runtime.invoked("version") == [["version"]]


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["volume-rm", "data", "cache"], ["volume", "rm", "data", "cache"]),
        (["volume-prune"], ["volume", "prune", "--force"]),
        (["network-prune"], ["network", "prune", "--force"]),
        (["image-prune", "--all"], ["image", "prune", "--force", "--all"]),
        (["pull", "alpine:3.19"], ["pull", "alpine:3.19"]),
        (["history", "alpine:3.19"], ["history", "alpine:3.19"]),
        (["stats"], ["stats", "--no-stream"]),
        (["logs", "-f", "-n", "20", "web"], ["logs", "--follow", "--tail", "20", "web"]),
        (["prune", "--all", "--volumes"], ["system", "prune", "--force", "--all", "--volumes"]),
    ],
)
def test_forwarding_commands(runtime: FakeRuntime, argv: list[str], expected: list[str]) -> None:
    result = runner.invoke(app, argv)

    assert result.exit_code == 0, result.output
    assert runtime.calls == [["docker", *expected]]


@pytest.mark.parametrize(
    ("argv", "subcommand"),
    [
        (["volume-rm", "data"], "volume"),
        (["network-prune"], "network"),
        (["pull", "nope:1"], "pull"),
        (["history", "nope:1"], "history"),
        (["logs", "web"], "logs"),
        (["stats"], "stats"),
    ],
)
def test_forwarding_commands_propagate_exit_code(runtime: FakeRuntime, argv: list[str], subcommand: str) -> None:
    runtime.respond(subcommand, returncode=4)

    result = runner.invoke(app, argv)

    assert result.exit_code == 4


def test_volumes_and_networks_tables(runtime: FakeRuntime) -> None:
    runtime.respond("volume", "ls", stdout=json.dumps({"Name": "pgdata", "Driver": "local", "Labels": ""}))
    runtime.respond("network", "ls", stdout=json.dumps({"ID": "n1", "Name": "backend", "Driver": "bridge", "Scope": "local"}))

    volumes = runner.invoke(app, ["volumes"])
    networks = runner.invoke(app, ["networks"])

    assert volumes.exit_code == 0, volumes.output
    assert "pgdata" in volumes.output and "DRIVER" in volumes.output
    assert networks.exit_code == 0, networks.output
    assert "backend" in networks.output and "SCOPE" in networks.output


def test_ip_prints_address(runtime: FakeRuntime) -> None:
    runtime.respond("inspect", stdout="172.18.0.5\n")

    result = runner.invoke(app, ["ip", "web"])

    assert result.exit_code == 0
    assert result.output.strip() == "172.18.0.5"


def test_ip_unknown_container_writes_runtime_error(runtime: FakeRuntime) -> None:
    runtime.respond("inspect", returncode=1, stderr="Error: No such object: ghost\n")

    result = runner.invoke(app, ["ip", "ghost"])

    assert result.exit_code == 1
    assert "No such object: ghost" in result.output


def test_unknown_log_level_is_reported(runtime: FakeRuntime, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCKALIAS_LOG_LEVEL", "verbose")

    result = runner.invoke(app, ["df"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert runtime.calls == []
