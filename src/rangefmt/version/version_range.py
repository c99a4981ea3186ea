from __future__ import annotations

from typing import TYPE_CHECKING

from rangefmt.version.float_range import FloatBehavior


if TYPE_CHECKING:
    from rangefmt.version.float_range import FloatRange
    from rangefmt.version.version import Version


class VersionRange:
    """
    An interval of versions with optional lower and upper bounds.

    The lower bound may be floating, in which case ``float_range`` holds the
    wildcard and ``min_version`` the lowest version it can match.

    Ranges support Python's format protocol, so ``f"{r:P}"`` and
    ``format(r, "L - U")`` render through the version range formatter.
    """

    def __init__(
        self,
        min_version: Version | None = None,
        max_version: Version | None = None,
        include_min: bool = True,
        include_max: bool = False,
        float_range: FloatRange | None = None,
    ) -> None:
        if min_version is None and float_range is not None:
            min_version = float_range.min_version

        self._min_version = min_version
        self._max_version = max_version
        self._include_min = include_min
        self._include_max = include_max
        self._float_range = float_range

    @property
    def min_version(self) -> Version | None:
        return self._min_version

    @property
    def max_version(self) -> Version | None:
        return self._max_version

    @property
    def include_min(self) -> bool:
        return self._include_min

    @property
    def include_max(self) -> bool:
        return self._include_max

    @property
    def float_range(self) -> FloatRange | None:
        return self._float_range

    @property
    def is_floating(self) -> bool:
        return (
            self._float_range is not None
            and self._float_range.behavior is not FloatBehavior.NONE
        )

    @property
    def has_lower_bound(self) -> bool:
        return self._min_version is not None

    @property
    def has_upper_bound(self) -> bool:
        return self._max_version is not None

    @property
    def has_lower_and_upper_bounds(self) -> bool:
        return self.has_lower_bound and self.has_upper_bound

    def format(self, fmt: str) -> str:
        from rangefmt.formatting.formatter import format_version_range

        return format_version_range(self, fmt)

    def to_normalized_string(self) -> str:
        return self.format("N")

    def to_legacy_string(self) -> str:
        return self.format("D")

    def to_legacy_short_string(self) -> str:
        return self.format("T")

    def to_short_string(self) -> str:
        return self.format("A")

    def pretty_print(self) -> str:
        return self.format("P")

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)

        return self.format(format_spec)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionRange):
            return NotImplemented

        return (
            self._min_version == other.min_version
            and self._max_version == other.max_version
            and self._include_min == other.include_min
            and self._include_max == other.include_max
            and self._float_range == other.float_range
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._min_version,
                self._max_version,
                self._include_min,
                self._include_max,
                self._float_range,
            )
        )

    def __str__(self) -> str:
        return self.to_normalized_string()

    def __repr__(self) -> str:
        return f"<VersionRange ({self})>"
