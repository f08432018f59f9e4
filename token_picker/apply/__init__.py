"""Apply module - turns resolved tokens into property patches for host targets."""

from .applier import TokenApplier, build_patch, describe_target
from .colors import parse_color

__all__ = ["TokenApplier", "build_patch", "describe_target", "parse_color"]
