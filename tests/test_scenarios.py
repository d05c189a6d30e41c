"""Run every tests/scenarios/*.tbx file through the CLI."""
from pathlib import Path

import pytest

from scenario_metadata import parse_scenario_metadata
from tagbox.cli import main

SCENARIO_DIR = Path(__file__).parent / "scenarios"
SCENARIOS = sorted(SCENARIO_DIR.glob("*.tbx"))


@pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda p: p.stem)
def test_scenario(scenario, capsys):
    metadata = parse_scenario_metadata(scenario)

    exit_code = main(metadata.cmd_args)
    out, err = capsys.readouterr()

    assert exit_code == metadata.expect_exit, err
    if metadata.expect_stdout_exact is not None:
        assert out == metadata.expect_stdout_exact
    for expected in metadata.expect_stdout_contains:
        assert expected in out
    for expected in metadata.expect_stderr_contains:
        assert expected in err
    if metadata.expect_stderr_empty:
        assert err == ""


def test_scenarios_present():
    assert SCENARIOS
