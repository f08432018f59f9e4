"""Pydantic data models for the token picker.

Catalog entries and everything derived from them are immutable (frozen)
after creation, so a catalog can be handed to the host layer without copying.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from .types import ApplyErrorKind, TokenCategory, TokenPath, UNKNOWN_TYPE


class CatalogEntry(BaseModel):
    """One token leaf with its references already resolved."""

    path: TokenPath
    name: str
    value: Any = None  # None when the reference chain could not be resolved
    type: str = UNKNOWN_TYPE

    model_config = {"frozen": True}

    @property
    def is_resolved(self) -> bool:
        """Check if the leaf resolved to a usable value."""
        return self.value is not None


class CategoryBuckets(BaseModel):
    """Catalog entries grouped by category, in catalog order."""

    colors: list[CatalogEntry] = Field(default_factory=list)
    spacing: list[CatalogEntry] = Field(default_factory=list)
    border_radius: list[CatalogEntry] = Field(default_factory=list, alias="borderRadius")
    typography: list[CatalogEntry] = Field(default_factory=list)
    effects: list[CatalogEntry] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}

    def get(self, category: TokenCategory) -> list[CatalogEntry]:
        """Get the entries for one category."""
        return getattr(self, category.value)

    @property
    def total(self) -> int:
        """Number of bucket memberships across all categories."""
        return sum(len(self.get(category)) for category in TokenCategory)

    def to_host_dict(self) -> dict[str, Any]:
        """Dump with the camelCase bucket names the host UI expects."""
        return self.model_dump(by_alias=True, mode="json")


class RGBAColor(BaseModel):
    """Color with channels on a 0-1 scale."""

    r: float
    g: float
    b: float
    a: float = 1.0

    model_config = {"frozen": True}


class SolidPaint(BaseModel):
    """Solid fill as understood by the host scene graph."""

    type: Literal["SOLID"] = "SOLID"
    color: dict[str, float]
    opacity: float = 1.0

    model_config = {"frozen": True}

    @classmethod
    def from_color(cls, color: RGBAColor) -> "SolidPaint":
        return cls(color={"r": color.r, "g": color.g, "b": color.b}, opacity=color.a)


class LineHeight(BaseModel):
    """Absolute line height."""

    value: float
    unit: Literal["PIXELS"] = "PIXELS"

    model_config = {"frozen": True}


class PropertyPatch(BaseModel):
    """Property assignments to make on one target.

    Only the fields that are set belong to the patch; the host layer
    decides whether a given target supports each of them.
    """

    fills: list[SolidPaint] | None = None
    font_size: float | None = Field(default=None, alias="fontSize")
    line_height: LineHeight | None = Field(default=None, alias="lineHeight")
    font_weight: float | None = Field(default=None, alias="fontWeight")
    corner_radius: float | None = Field(default=None, alias="cornerRadius")
    padding_left: float | None = Field(default=None, alias="paddingLeft")
    padding_right: float | None = Field(default=None, alias="paddingRight")
    padding_top: float | None = Field(default=None, alias="paddingTop")
    padding_bottom: float | None = Field(default=None, alias="paddingBottom")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_empty(self) -> bool:
        return not self.to_host_dict()

    def to_host_dict(self) -> dict[str, Any]:
        """Dump only the assigned properties, with host property names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ApplyFailure(BaseModel):
    """A single target that could not be updated."""

    target: str
    error: str

    model_config = {"frozen": True}


class ApplyResult(BaseModel):
    """Outcome of applying one token to the selected targets."""

    success: bool
    message: str
    affected_count: int = 0
    error: ApplyErrorKind | None = None
    failures: list[ApplyFailure] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def rejected(cls, error: ApplyErrorKind, message: str | None = None) -> "ApplyResult":
        return cls(success=False, error=error, message=message or error.message)

    @classmethod
    def applied(cls, affected_count: int, failures: list[ApplyFailure]) -> "ApplyResult":
        noun = "item" if affected_count == 1 else "items"
        return cls(
            success=True,
            affected_count=affected_count,
            failures=failures,
            message=f"Applied token to {affected_count} {noun}",
        )
