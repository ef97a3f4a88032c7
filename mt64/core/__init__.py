"""Core data model: generator state, snapshots, enums, errors."""

from mt64.core.enums import Distribution
from mt64.core.errors import InvalidArgument
from mt64.core.snapshot import GeneratorSnapshot
from mt64.core.state import GeneratorState

__all__ = ["Distribution", "GeneratorSnapshot", "GeneratorState", "InvalidArgument"]
