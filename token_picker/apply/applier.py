"""Token applier - turns a chosen token into property patches for targets.

The scene graph itself belongs to the host. The applier resolves the
token, works out which properties it sets, and hands a PropertyPatch to
a host-supplied ``assign`` callback one target at a time. A target whose
assignment fails is logged and recorded; the remaining targets are still
processed.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from ..catalog import TokenCatalog
from ..core.exceptions import CircularReferenceError
from ..core.models import ApplyFailure, ApplyResult, LineHeight, PropertyPatch, SolidPaint
from ..core.types import ApplyErrorKind
from .colors import parse_color

logger = logging.getLogger(__name__)

Target = TypeVar("Target")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_patch(
    value: Any,
    token_path: str,
    token_type: str | None = None,
    prop: str | None = None,
) -> PropertyPatch:
    """
    Work out the property assignments for a resolved token value.

    Args:
        value: Resolved token value
        token_path: Path of the token (spacing only pads "padding" tokens)
        token_type: Declared token type, e.g. "color"
        prop: Target property picked in the UI, e.g. "fontSize"

    Returns:
        PropertyPatch, empty if the value does not fit the property
    """
    fields: dict[str, Any] = {}

    if token_type == "color" or prop == "fill":
        color = parse_color(str(value))
        if color:
            fields["fills"] = [SolidPaint.from_color(color)]

    if _is_number(value):
        if prop == "fontSize":
            fields["font_size"] = value
        elif prop == "lineHeight":
            fields["line_height"] = LineHeight(value=value)
        elif prop == "fontWeight":
            fields["font_weight"] = value
        elif prop == "cornerRadius":
            fields["corner_radius"] = value
        elif prop == "spacing" and "padding" in token_path:
            for side in ("left", "right", "top", "bottom"):
                fields[f"padding_{side}"] = value

    return PropertyPatch(**fields)


def describe_target(target: Any) -> str:
    """Short label for a target in logs and failure reports."""
    if isinstance(target, dict):
        return str(target.get("name") or target.get("id") or target)
    return str(getattr(target, "name", None) or getattr(target, "id", None) or target)


class TokenApplier(Generic[Target]):
    """Applies tokens from a catalog to host targets of one kind."""

    def __init__(self, catalog: TokenCatalog):
        self.catalog = catalog

    def apply(
        self,
        targets: Sequence[Target],
        token_path: str | None,
        assign: Callable[[Target, PropertyPatch], None],
        token_type: str | None = None,
        prop: str | None = None,
    ) -> ApplyResult:
        """
        Apply one token to every target.

        Args:
            targets: Selected targets (components or frames)
            token_path: Dotted path of the chosen token
            assign: Host callback that sets a patch on one target
            token_type: Declared token type, e.g. "color"
            prop: Target property picked in the UI

        Returns:
            ApplyResult with the affected count, or the reason nothing
            was applied
        """
        if not targets:
            return ApplyResult.rejected(ApplyErrorKind.NO_TARGET_SELECTED)
        if not token_path:
            return ApplyResult.rejected(ApplyErrorKind.NO_TOKEN_SPECIFIED)
        if not self.catalog.is_loaded:
            return ApplyResult.rejected(ApplyErrorKind.DOCUMENT_NOT_LOADED)

        try:
            value = self.catalog.resolve_path(token_path)
        except CircularReferenceError as e:
            logger.warning(f"Cannot apply {token_path}: {e.message}")
            return ApplyResult.rejected(
                ApplyErrorKind.TOKEN_NOT_FOUND,
                f"{ApplyErrorKind.TOKEN_NOT_FOUND.message} (circular reference)",
            )

        if value is None:
            return ApplyResult.rejected(ApplyErrorKind.TOKEN_NOT_FOUND)

        patch = build_patch(value, token_path, token_type, prop)
        if patch.is_empty:
            logger.debug(f"Token {token_path}={value!r} sets no properties for prop={prop}")

        affected = 0
        failures: list[ApplyFailure] = []
        for target in targets:
            try:
                assign(target, patch)
                affected += 1
            except Exception as e:
                label = describe_target(target)
                logger.error(f"Error applying token {token_path} to {label}: {e}")
                failures.append(ApplyFailure(target=label, error=str(e)))

        logger.info(f"Applied {token_path} to {affected}/{len(targets)} targets")
        return ApplyResult.applied(affected, failures)
