"""Layout algorithms and page-width configuration."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from prettydoc.diagnostics import (
    OPTIONS_INVALID_RIBBON,
    OPTIONS_INVALID_WIDTH,
    InvalidLayoutOptionsError,
)


class LayoutAlgorithm(StrEnum):
    """Fitting policy used by the layout engine."""

    PRETTY = "pretty"
    SMART = "smart"
    COMPACT = "compact"


@dataclass(frozen=True, slots=True)
class Unbounded:
    """No width limit; only hard line breaks are taken."""

    pass


@dataclass(frozen=True, slots=True)
class Bounded:
    """
    Page of `max_width` columns.

    The ribbon is the part of a line after its indentation; the layouter tries
    to keep it within `ribbon_fraction` of the page width.
    """

    max_width: int
    ribbon_fraction: float = 1.0

    def __post_init__(self) -> None:
        if isinstance(self.max_width, bool) or not isinstance(self.max_width, int):
            raise InvalidLayoutOptionsError.from_spec(
                OPTIONS_INVALID_WIDTH, detail=f"Got {self.max_width!r}."
            )
        if self.max_width <= 0:
            raise InvalidLayoutOptionsError.from_spec(
                OPTIONS_INVALID_WIDTH, detail=f"Got {self.max_width!r}."
            )
        if isinstance(self.ribbon_fraction, bool) or not isinstance(
            self.ribbon_fraction, (int, float)
        ):
            raise InvalidLayoutOptionsError.from_spec(
                OPTIONS_INVALID_RIBBON, detail=f"Got {self.ribbon_fraction!r}."
            )
        if not 0 < self.ribbon_fraction <= 1:
            raise InvalidLayoutOptionsError.from_spec(
                OPTIONS_INVALID_RIBBON, detail=f"Got {self.ribbon_fraction!r}."
            )

    @property
    def ribbon_width(self) -> int:
        return max(0, min(self.max_width, round(self.max_width * self.ribbon_fraction)))

    def remaining_width(self, indent: int, column: int) -> int:
        """Columns left on the current line, bounded by both page and ribbon."""
        left_in_line = self.max_width - column
        left_in_ribbon = indent + self.ribbon_width - column
        return min(left_in_line, left_in_ribbon)


type PageWidth = Unbounded | Bounded

DEFAULT_PAGE_WIDTH: Final[Bounded] = Bounded(max_width=80, ribbon_fraction=1.0)


@dataclass(frozen=True, slots=True)
class LayoutOptions:
    """Everything a layout call can be configured with."""

    page_width: PageWidth = DEFAULT_PAGE_WIDTH
    algorithm: LayoutAlgorithm = LayoutAlgorithm.PRETTY

    @staticmethod
    def default() -> "LayoutOptions":
        return LayoutOptions()

    @staticmethod
    def for_algorithm(
        algorithm: LayoutAlgorithm,
        page_width: PageWidth | None = None,
    ) -> "LayoutOptions":
        if page_width is None:
            page_width = DEFAULT_PAGE_WIDTH
        return LayoutOptions(page_width=page_width, algorithm=algorithm)
