"""Tests for the command line interface."""
from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from job_registry import main as cli
from job_registry.config import settings

ADMIN = "0xadmin"


@pytest.fixture
def run(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setattr(settings, "admin_identity", ADMIN)
    monkeypatch.setattr(settings, "log_level", None)
    db = str(tmp_path / "registry.db")
    config = str(tmp_path / "config.yaml")

    def invoke(*args: str) -> tuple[int, object]:
        code = cli.main(["--db", db, "--config", config, *args])
        out = capsys.readouterr().out
        return code, json.loads(out) if out.strip() else None

    return invoke


def test_cli_scenario(run) -> None:
    assert run("register-applicant", "Asha", "--classification", "graduate") == (0, {"id": 1})
    assert run("register-job", "Mason", "--salary", "500") == (0, {"id": 1})
    assert run("--caller", "0xanyone", "apply", "1", "1") == (0, None)
    assert run("rate", "1", "4") == (0, None)

    code, applicant = run("get-applicant", "1")
    assert code == 0
    assert applicant["rating"] == 4
    assert applicant["available"] is True
    assert run("rating", "1") == (0, {"rating": 4})
    assert run("classification", "1") == (0, {"classification": 1, "label": "Graduate"})
    assert run("applications", "1") == (0, {"job_id": 1, "applicants": [1]})

    code, job = run("get-job", "1")
    assert job["poster"] == ADMIN
    assert job["is_open"] is True


def test_cli_reports_registry_errors(run) -> None:
    assert run("get-applicant", "1") == (1, None)
    assert run("--caller", "0xoutsider", "register-job", "Spam") == (1, None)
    assert run("stats") == (
        0,
        {"total_applicants": 0, "rated_applicants": 0, "total_jobs": 0, "total_applications": 0},
    )


def test_cli_requires_admin_identity(run, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "admin_identity", None)

    assert run("stats") == (2, None)


@pytest.mark.parametrize("content", ["admin_identity: [unclosed\n", "log_level: [1, 2]\n"])
def test_cli_rejects_invalid_config(run, tmp_path: Path, content: str) -> None:
    (tmp_path / "config.yaml").write_text(content, encoding="utf-8")

    assert run("stats") == (2, None)


def test_cli_stdout_carries_only_json(tmp_path: Path) -> None:
    root = Path(__file__).resolve().parents[1]
    env = dict(os.environ)
    env["JOB_REGISTRY_ADMIN_IDENTITY"] = ADMIN
    env.pop("JOB_REGISTRY_LOG_LEVEL", None)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(root), env.get("PYTHONPATH")]))

    completed = subprocess.run(
        [
            sys.executable,
            "-m",
            "job_registry.main",
            "--db",
            str(tmp_path / "registry.db"),
            "--config",
            str(tmp_path / "config.yaml"),
            "register-applicant",
            "Asha",
        ],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 0
    assert json.loads(completed.stdout) == {"id": 1}
    assert "Registered applicant 1" in completed.stderr
