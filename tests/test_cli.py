import io

import pytest

from settleplan.actions import ActionStatus, RestoreSimulation
from settleplan.cli import main
from settleplan.simulation import Simulation


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text(
        "settlement Alpha 1\nfacility park 0 1 2 3 4\nplan Alpha nve\n",
        encoding="utf-8",
    )
    return str(path)


def test_usage_without_arguments(capsys):
    assert main([]) == 0
    assert "usage: simulation <config_path>" in capsys.readouterr().out


def test_usage_with_too_many_arguments(capsys):
    assert main(["a", "b"]) == 0
    assert "usage: simulation <config_path>" in capsys.readouterr().out


def test_backup_is_cleared_after_run(config_file, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("backup\nclose\n"))
    main([config_file])
    action = RestoreSimulation()
    action.act(Simulation())
    assert action.status is ActionStatus.ERROR
    assert action.error_message == "No backup available"