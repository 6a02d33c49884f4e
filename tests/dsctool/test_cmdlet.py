# tests/dsctool/test_cmdlet.py
"""
Tests del runner PowerShell y de run_command (PowerShell se sustituye por fakes o por un intérprete Python).
"""

import sys

import pytest

from dscplane.core.errors import CmdletError
from dscplane.core.lcm.manager import LocalConfigurationManager
from dsctool.core.tools import COMMAND_NOT_FOUND_STATUS, COMMAND_TIMEOUT_STATUS, run_command
from dsctool.dsc.lcm_parser import LcmOutputParser
from dsctool.powershell import cmdlet as cmdlet_module
from dsctool.powershell.cmdlet import PowershellCmdlet, cmdlet_factory


@pytest.fixture
def fake_run_command(monkeypatch):
    calls = []
    outcome = {"value": (0, "ok", "")}

    def _run(command, cwd=None, timeout=None):
        calls.append(command)
        return outcome["value"]

    monkeypatch.setattr(cmdlet_module, "run_command", _run)
    return calls, outcome


def test_command_line_uses_noninteractive_flags():
    cmdlet = PowershellCmdlet("node", "Get-Date", executable="pwsh")

    assert cmdlet.command_line() == [
        "pwsh", "-NoLogo", "-NonInteractive", "-NoProfile",
        "-ExecutionPolicy", "Unrestricted", "-InputFormat", "None",
        "-Command", "Get-Date",
    ]


def test_run_success(fake_run_command):
    calls, _ = fake_run_command

    result = PowershellCmdlet("node", "Get-Date").run()

    assert result.succeeded is True
    assert result.exit_status == 0
    assert result.stdout == "ok"
    assert calls[0][0] == "powershell.exe"


def test_run_failure_does_not_raise(fake_run_command):
    _, outcome = fake_run_command
    outcome["value"] = (0x80131500, "", "module missing")

    result = PowershellCmdlet("node", "x").run()

    assert result.succeeded is False
    assert result.exit_status == 0x80131500
    assert result.stderr == "module missing"


def test_run_checked_raises_with_normalized_stderr(fake_run_command):
    _, outcome = fake_run_command
    outcome["value"] = (1, "", "Access\n   is denied.")

    with pytest.raises(CmdletError) as excinfo:
        PowershellCmdlet("node", "x").run_checked()

    assert str(excinfo.value) == "Powershell Cmdlet failed: Access is denied."
    assert excinfo.value.exit_status == 1


def test_run_checked_returns_result_on_success(fake_run_command):
    assert PowershellCmdlet("node", "x").run_checked().succeeded


def test_factory_passes_executable_and_node():
    factory = cmdlet_factory("pwsh")
    cmdlet = factory("web01", "Get-Date")

    assert isinstance(cmdlet, PowershellCmdlet)
    assert cmdlet.executable == "pwsh"
    assert cmdlet.node == "web01"
    assert cmdlet.command == "Get-Date"


def test_run_command_missing_executable():
    exit_status, stdout, stderr = run_command(["dsctool-no-such-executable-xyz"])

    assert exit_status == COMMAND_NOT_FOUND_STATUS
    assert stdout == ""
    assert "dsctool-no-such-executable-xyz" in stderr


def test_run_command_timeout_returns_failure_tuple():
    exit_status, stdout, stderr = run_command(
        [sys.executable, "-c", "import time; time.sleep(5)"],
        timeout=1,
    )

    assert exit_status == COMMAND_TIMEOUT_STATUS
    assert stdout == ""
    assert "Timeout" in stderr


# ---------------------------------------------------------------------
# Salida con bytes no decodificables
# ---------------------------------------------------------------------

INVALID_BYTES_SCRIPT = (
    "import sys; "
    "sys.stdout.buffer.write(b'What if: \\xff\\xfe bad\\n'); "
    "sys.stderr.buffer.write(b'\\xff\\xfe')"
)


@pytest.fixture
def python_cmdlet(monkeypatch):
    """PowershellCmdlet real cuyo proceso es un intérprete Python"""
    monkeypatch.setattr(
        PowershellCmdlet,
        "command_line",
        lambda self: [sys.executable, "-c", INVALID_BYTES_SCRIPT],
    )


def test_run_command_replaces_undecodable_bytes():
    exit_status, stdout, stderr = run_command([sys.executable, "-c", INVALID_BYTES_SCRIPT])

    assert exit_status == 0
    assert isinstance(stdout, str)
    assert "bad" in stdout
    assert "�" in stderr


def test_run_with_undecodable_output_returns_result(python_cmdlet):
    result = PowershellCmdlet("node", "ignored").run()

    assert result.succeeded is True
    assert "What if:" in result.stdout


def test_manager_with_undecodable_output_returns_records(python_cmdlet, config_dir):
    manager = LocalConfigurationManager(
        "node", config_dir, runner_factory=cmdlet_factory("pwsh"), parser=LcmOutputParser()
    )

    records = manager.test_configuration(b"x")

    assert isinstance(records, list)
