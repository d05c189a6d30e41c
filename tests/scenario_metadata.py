"""
Scenario metadata parsing for the tagbox CLI tests.

A scenario file (*.tbx) is a list of header comments describing one CLI run
and its expected behavior:

# CMD_ARGS: --values "42, 3.14, 'A'" --show-capacity
# EXPECT_EXIT: 0
# EXPECT_STDOUT_EXACT: "Index: 0, Type: INT, Value: 42\\n"
# EXPECT_STDOUT_CONTAINS: "Invalid Data"
# EXPECT_STDERR_CONTAINS: "RE2021"
# EXPECT_STDERR_EMPTY: true
"""

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class ScenarioMetadata:
    """Expected behavior of one CLI run."""

    cmd_args: List[str] = field(default_factory=list)
    expect_exit: Optional[int] = None
    expect_stdout_exact: Optional[str] = None
    expect_stdout_contains: List[str] = field(default_factory=list)
    expect_stderr_contains: List[str] = field(default_factory=list)
    expect_stderr_empty: bool = False


def _unquote(value: str) -> str:
    if value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    # Handle escape sequences
    return value.replace('\\n', '\n').replace('\\t', '\t')


def get_scenario_category(scenario_file: Path) -> str:
    """
    Determine the scenario category from its filename.

    Returns:
        'error': CLI must reject the input (test_err_*)
        'warning': CLI must succeed with a diagnostic on stderr (test_warn_*)
        'runtime': CLI must succeed (test_run_* and anything else)
    """
    filename = scenario_file.name
    if filename.startswith('test_err_'):
        return 'error'
    if filename.startswith('test_warn_'):
        return 'warning'
    return 'runtime'


def parse_scenario_metadata(scenario_file: Path) -> ScenarioMetadata:
    """
    Parse the header directives of a scenario file.

    When EXPECT_EXIT is absent it defaults from the filename category:
    2 for test_err_* and 0 otherwise.
    """
    metadata = ScenarioMetadata()

    for line in scenario_file.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line.startswith('#'):
            continue

        directive, sep, value = line[1:].strip().partition(':')
        if not sep:
            continue
        value = value.strip()

        if directive == 'CMD_ARGS':
            metadata.cmd_args = shlex.split(value)
        elif directive == 'EXPECT_EXIT':
            metadata.expect_exit = int(value)
        elif directive == 'EXPECT_STDOUT_EXACT':
            metadata.expect_stdout_exact = _unquote(value)
        elif directive == 'EXPECT_STDOUT_CONTAINS':
            metadata.expect_stdout_contains.append(_unquote(value))
        elif directive == 'EXPECT_STDERR_CONTAINS':
            metadata.expect_stderr_contains.append(_unquote(value))
        elif directive == 'EXPECT_STDERR_EMPTY':
            metadata.expect_stderr_empty = value.lower() in ('true', 'yes', '1')
        else:
            raise ValueError(f"unknown directive {directive!r} in {scenario_file}")

    if metadata.expect_exit is None:
        metadata.expect_exit = 2 if get_scenario_category(scenario_file) == 'error' else 0

    return metadata
