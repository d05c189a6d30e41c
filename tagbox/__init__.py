"""tagbox - tagged values in a fixed tuple and a growable list."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("tagbox")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

from tagbox.values import Kind, IntValue, FloatValue, CharValue, TaggedValue, make_value
from tagbox.containers import FixedTuple, GrowableList, DEFAULT_CAPACITY
from tagbox.display import format_value, format_entries, print_container
from tagbox.internals.errors import (
    TagboxError,
    AllocationFailure,
    ReleasedContainerError,
    ValueKindError,
    LiteralSyntaxError,
)

__all__ = [
    'Kind',
    'IntValue',
    'FloatValue',
    'CharValue',
    'TaggedValue',
    'make_value',
    'FixedTuple',
    'GrowableList',
    'DEFAULT_CAPACITY',
    'format_value',
    'format_entries',
    'print_container',
    'TagboxError',
    'AllocationFailure',
    'ReleasedContainerError',
    'ValueKindError',
    'LiteralSyntaxError',
]
