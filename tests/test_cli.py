"""CLI tests: typer CliRunner against temp projects."""

import logging
import socket
import subprocess
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cmdhelper.cli import app
from cmdhelper.config import CONFIG_ENV

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Never read the developer's real config file."""
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "no-config.toml"))
    yield
    # handlers point at the runner's closed streams
    logging.getLogger().handlers = []


@pytest.fixture
def project(tmp_path):
    d = tmp_path / "project"
    d.mkdir()
    return d


def _completed(code):
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_identify_rust(project):
    (project / "Cargo.toml").write_text("")
    result = runner.invoke(app, ["identify", str(project)])
    assert result.exit_code == 0
    assert result.output.strip() == "rust"


def test_identify_unknown_exits_1(project):
    result = runner.invoke(app, ["identify", str(project)])
    assert result.exit_code == 1
    assert "Unknown project type" in result.output


def test_run_unsupported_verb_is_not_fatal(project):
    with patch("cmdhelper.engine.subprocess.run") as run:
        result = runner.invoke(app, ["run", "deploy", "-L", "rust", "--no-install-hints"])
    assert result.exit_code == 0
    assert "Supported actions" in result.output
    assert "update" in result.output
    run.assert_not_called()


def test_run_unsupported_language(project):
    with patch("cmdhelper.engine.subprocess.run") as run:
        result = runner.invoke(app, ["run", "run", "-L", "cobol", "--no-install-hints"])
    assert result.exit_code == 0
    assert "Unsupported language: cobol" in result.output
    run.assert_not_called()


def test_run_detects_language(project, monkeypatch):
    (project / "package.json").write_text("{}")
    monkeypatch.chdir(project)
    with patch("cmdhelper.engine.subprocess.run", return_value=_completed(0)) as run:
        result = runner.invoke(app, ["run", "TEST", "--no-install-hints"])
    assert result.exit_code == 0
    assert "Identified project type: js" in result.output
    argv = run.call_args[0][0]
    assert argv[-1] == "test"
    assert "npm" in argv[0]


def test_run_echoes_child_exit_code(project):
    with patch("cmdhelper.engine.subprocess.run", return_value=_completed(3)):
        result = runner.invoke(app, ["run", "build", "-L", "cargo", "--no-install-hints"])
    assert result.exit_code == 3
    assert "Error executing command" in result.output


def test_run_launch_failure_exits_1(project):
    with patch("cmdhelper.engine.subprocess.run", side_effect=FileNotFoundError("cargo")):
        result = runner.invoke(app, ["run", "build", "-L", "cargo", "--no-install-hints"])
    assert result.exit_code == 1


def test_run_unknown_project_reports(project, monkeypatch):
    monkeypatch.chdir(project)
    result = runner.invoke(app, ["run", "build", "--no-install-hints"])
    assert result.exit_code == 0
    assert "Error identifying project type" in result.output


def test_run_prompts_for_parameter(project):
    with patch("cmdhelper.engine.subprocess.run", return_value=_completed(0)) as run:
        result = runner.invoke(app, ["run", "install", "-L", "python", "--no-install-hints"], input="requests\n")
    assert result.exit_code == 0
    assert run.call_args[0][0][-2:] == ["install", "requests"]


def test_run_missing_tool_shows_hints(project):
    with patch("cmdhelper.cli.is_tool_installed", return_value=False), patch(
        "cmdhelper.installer.resolve_program", return_value=None
    ), patch("cmdhelper.engine.subprocess.run", return_value=_completed(0)):
        result = runner.invoke(app, ["run", "build", "-L", "dotnet"])
    assert result.exit_code == 0
    assert "dotnet is not installed" in result.output
    assert "https://dotnet.microsoft.com/download" in result.output


def test_actions_lists_table():
    result = runner.invoke(app, ["actions", "rust"])
    assert result.exit_code == 0
    assert "cargo:" in result.output
    assert "cargo fmt" in result.output


def test_grep(project):
    (project / "a.txt").write_text("alpha\nneedle line\n")
    result = runner.invoke(app, ["--no-color", "grep", "needle", "-p", str(project)])
    assert result.exit_code == 0
    assert "a.txt : 2    : needle line" in result.output


def test_grep_no_results(project):
    (project / "a.txt").write_text("alpha\n")
    result = runner.invoke(app, ["grep", "needle", "-p", str(project)])
    assert result.exit_code == 0
    assert "No results found for your input 'needle'" in result.output


def test_find(project):
    (project / "x.toml").write_text("")
    result = runner.invoke(app, ["find", "*.toml", "-p", str(project)])
    assert result.exit_code == 0
    assert "x.toml" in result.output


def test_copy(project, tmp_path):
    src = project / "f.txt"
    src.write_text("x")
    out = tmp_path / "out"
    out.mkdir()
    result = runner.invoke(app, ["copy", str(src), "-o", str(out), "-n", "g.txt"])
    assert result.exit_code == 0
    assert (out / "g.txt").read_text() == "x"
    assert "File copied" in result.output


def test_text_case():
    result = runner.invoke(app, ["text", "case", "snake", "Hello World"])
    assert result.exit_code == 0
    assert "hello_world" in result.output


def test_text_case_invalid():
    result = runner.invoke(app, ["text", "case", "sponge", "x"])
    assert result.exit_code == 2


def test_hash_string():
    result = runner.invoke(app, ["hash", "string", "abc", "--algo", "md5"])
    assert result.exit_code == 0
    assert "900150983cd24fb0d6963f7d28e17f72" in result.output


def test_hash_verify_mismatch_exits_1(project):
    f = project / "f.bin"
    f.write_bytes(b"abc")
    result = runner.invoke(app, ["hash", "file", str(f), "--algo", "md5", "--verify", "00"])
    assert result.exit_code == 1
    assert "verification failed" in result.output


def test_fmt_query():
    result = runner.invoke(app, ["fmt", "query", '{"a": {"b": [1, 2]}}', "a.b.1"])
    assert result.exit_code == 0
    assert "2" in result.output


def test_fmt_validate_invalid():
    result = runner.invoke(app, ["fmt", "validate-json", "{nope"])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_fmt_reads_stdin():
    result = runner.invoke(app, ["fmt", "minify", "-"], input='{ "a" : 1 }')
    assert result.exit_code == 0
    assert '{"a":1}' in result.output


def test_env_get_missing(monkeypatch):
    monkeypatch.delenv("CMDH_CLI_MISSING", raising=False)
    result = runner.invoke(app, ["env", "get", "CMDH_CLI_MISSING"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_config_show_defaults():
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "Current Configuration" in result.output
    assert "no-config.toml" in result.output


def test_bad_config_is_usage_error(tmp_path, monkeypatch):
    bad = tmp_path / "bad.toml"
    bad.write_text("[general\n")
    monkeypatch.setenv(CONFIG_ENV, str(bad))
    result = runner.invoke(app, ["config", "path"])
    assert result.exit_code == 2


def _missing_tool_with_apt():
    """The checked toolchain is absent and every package manager is on PATH."""
    return (
        patch("cmdhelper.cli.is_tool_installed", return_value=False),
        patch("cmdhelper.cli.current_os", return_value="linux"),
        patch("cmdhelper.installer.resolve_program", side_effect=lambda name: f"/usr/bin/{name}"),
    )


def test_run_piped_input_reaches_action_prompt_when_tool_missing(project):
    missing, os_name, managers = _missing_tool_with_apt()
    with missing, os_name, managers, patch("cmdhelper.engine.subprocess.run", return_value=_completed(0)) as run:
        result = runner.invoke(app, ["run", "install", "-L", "python"], input="requests\n")
    assert result.exit_code == 0
    assert "skipping auto-install" in result.output
    assert run.call_count == 1
    assert run.call_args[0][0][-2:] == ["install", "requests"]


def test_run_declined_install_still_dispatches(project):
    missing, os_name, managers = _missing_tool_with_apt()
    with missing, os_name, managers, patch("cmdhelper.cli._interactive", return_value=True), patch(
        "cmdhelper.engine.subprocess.run", return_value=_completed(0)
    ) as run:
        result = runner.invoke(app, ["run", "install", "-L", "python"], input="n\nrequests\n")
    assert result.exit_code == 0
    assert run.call_count == 1
    assert run.call_args[0][0][-2:] == ["install", "requests"]


def test_run_aborted_confirm_still_dispatches(project):
    missing, os_name, managers = _missing_tool_with_apt()
    with missing, os_name, managers, patch("cmdhelper.cli._interactive", return_value=True), patch(
        "cmdhelper.engine.subprocess.run", return_value=_completed(0)
    ) as run:
        result = runner.invoke(app, ["run", "build", "-L", "cargo"], input="")
    assert result.exit_code == 0
    assert "Aborted" not in result.output
    assert run.call_count == 1
    assert run.call_args[0][0][-1] == "build"


def test_run_accepted_install_runs_package_manager_first(project):
    missing, os_name, managers = _missing_tool_with_apt()
    with missing, os_name, managers, patch("cmdhelper.cli._interactive", return_value=True), patch(
        "cmdhelper.engine.subprocess.run", return_value=_completed(0)
    ) as run:
        result = runner.invoke(app, ["run", "build", "-L", "cargo"], input="y\n")
    assert result.exit_code == 0
    calls = [c[0][0] for c in run.call_args_list]
    assert len(calls) == 2
    assert "apt" in calls[0] and calls[0][-1] == "cargo"
    assert calls[1][-1] == "build"


def test_run_accepts_empty_parameter(project):
    with patch("cmdhelper.engine.subprocess.run", return_value=_completed(0)) as run:
        result = runner.invoke(app, ["run", "run", "-L", "python", "--no-install-hints"], input="\n")
    assert result.exit_code == 0
    assert run.call_count == 1
    assert run.call_args[0][0][-1] == ""


def test_run_failure_reported_once(project):
    with patch("cmdhelper.engine.subprocess.run", return_value=_completed(3)):
        result = runner.invoke(app, ["run", "build", "-L", "cargo", "--no-install-hints"])
    assert result.output.count("build") == 1


@pytest.fixture
def listening_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        yield s.getsockname()[1]


def test_net_port_open(listening_port):
    result = runner.invoke(app, ["net", "port", str(listening_port), "--host", "127.0.0.1"])
    assert result.exit_code == 0
    assert "is OPEN" in result.output


def test_net_port_closed_exits_1():
    with patch("cmdhelper.cli.network.check_port", return_value=False):
        result = runner.invoke(app, ["net", "port", "9", "--host", "127.0.0.1"])
    assert result.exit_code == 1
    assert "is CLOSED" in result.output


def test_net_dns_literal():
    result = runner.invoke(app, ["net", "dns", "127.0.0.1"])
    assert result.exit_code == 0
    assert "IP Addresses:" in result.output
    assert "127.0.0.1" in result.output


def test_net_ping_passes_exit_code_through():
    with patch("cmdhelper.cli.current_os", return_value="linux"), patch(
        "cmdhelper.engine.subprocess.run", return_value=_completed(2)
    ) as run:
        result = runner.invoke(app, ["net", "ping", "example.com", "-c", "1"])
    assert result.exit_code == 2
    assert run.call_args[0][0][1:] == ["-c", "1", "example.com"]
