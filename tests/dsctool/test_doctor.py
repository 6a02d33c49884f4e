# tests/dsctool/test_doctor.py
"""
Tests del doctor (PowerShell y módulo DSC), sin ejecutar PowerShell.
"""

import pytest
from rich.console import Console

from dsctool.core import doctor
from dsctool.core.tools import COMMAND_TIMEOUT_STATUS


@pytest.fixture
def fake_powershell(monkeypatch):
    responses = {}

    def _run(command, cwd=None, timeout=None):
        script = command[-1]
        key = "module" if "Get-Module" in script else "version"
        return responses.get(key, (-1, "", "Comando no encontrado"))

    monkeypatch.setattr(doctor, "run_command", _run)
    return responses


def test_all_checks_pass(fake_powershell):
    fake_powershell["version"] = (0, "5.1.19041.1\n", "")
    fake_powershell["module"] = (0, "1.1\n", "")
    console = Console(record=True, width=120, color_system=None)

    results = doctor.run_doctor(console, "powershell.exe")

    assert results == {"powershell": True, "dsc_module": True}
    assert "5.1.19041.1" in console.export_text()


def test_missing_module(fake_powershell):
    fake_powershell["version"] = (0, "7.4.0\n", "")
    fake_powershell["module"] = (1, "", "")

    results = doctor.run_doctor(Console(record=True), "pwsh")

    assert results == {"powershell": True, "dsc_module": False}


def test_missing_powershell_skips_module_check(fake_powershell):
    results = doctor.run_doctor(Console(record=True), "pwsh")

    assert results == {"powershell": False, "dsc_module": False}


def test_check_powershell_version(fake_powershell):
    fake_powershell["version"] = (0, "7.4.0\r\n", "")

    assert doctor.check_powershell("pwsh") == (True, "7.4.0")


def test_powershell_timeout_is_reported_as_missing(fake_powershell):
    fake_powershell["version"] = (COMMAND_TIMEOUT_STATUS, "", "Timeout (30s) ejecutando: pwsh")
    console = Console(record=True, width=120, color_system=None)

    results = doctor.run_doctor(console, "pwsh")

    assert results["powershell"] is False
