from __future__ import annotations

import enum
import logging

from typing import TYPE_CHECKING

from rangefmt.exceptions import InvalidArgumentError


if TYPE_CHECKING:
    from collections.abc import Callable

    from rangefmt.version.version import Version
    from rangefmt.version.version_range import VersionRange


logger = logging.getLogger(__name__)


class RangeFormat(enum.Enum):
    PRETTY = "P"
    LOWER = "L"
    UPPER = "U"
    TO_STRING = "S"
    NORMALIZED = "N"
    LEGACY = "D"
    LEGACY_SHORT = "T"
    SHORT = "A"

    @classmethod
    def from_specifier(cls, specifier: str) -> RangeFormat | None:
        try:
            return cls(specifier)
        except ValueError:
            return None

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    RangeFormat.PRETTY: "Pretty printed boolean expression, e.g. (>= 1.0.0 && < 2.0.0)",
    RangeFormat.LOWER: "Lower bound version",
    RangeFormat.UPPER: "Upper bound version",
    RangeFormat.TO_STRING: "Short notation, floating lower bounds shown as wildcards",
    RangeFormat.NORMALIZED: "Normalized bracket notation without short hand",
    RangeFormat.LEGACY: "Legacy bracket notation",
    RangeFormat.LEGACY_SHORT: "Legacy short notation",
    RangeFormat.SHORT: "Short notation",
}


class VersionRangeFormatter:
    """
    Renders version ranges using single character format specifiers.

    Each character of a format string is rendered independently; characters
    which are not specifiers are copied to the output unchanged, so
    ``"L - U"`` renders as ``"1.0.0 - 2.0.0"``.
    """

    def __init__(self) -> None:
        self._renderers: dict[RangeFormat, Callable[[VersionRange], str]] = {
            RangeFormat.PRETTY: self._pretty_print,
            RangeFormat.LOWER: self._lower_bound,
            RangeFormat.UPPER: self._upper_bound,
            RangeFormat.TO_STRING: self._to_string,
            RangeFormat.NORMALIZED: self._normalized_string,
            RangeFormat.LEGACY: self._legacy_string,
            RangeFormat.LEGACY_SHORT: self._legacy_short_string,
            RangeFormat.SHORT: self._short_string,
        }

    def format(self, version_range: VersionRange | None, fmt: str) -> str:
        if version_range is None:
            raise InvalidArgumentError("A version range is required.")

        # single char identifiers
        if len(fmt) == 1:
            formatted = self.render(version_range, fmt)
            return fmt if formatted is None else formatted

        parts = []
        for char in fmt:
            formatted = self.render(version_range, char)
            if formatted is None:
                logger.debug("Passing through format character %r", char)
                formatted = char

            parts.append(formatted)

        return "".join(parts)

    def render(self, version_range: VersionRange, specifier: str) -> str | None:
        """
        Render a single format specifier.

        Returns None when the specifier is not recognized.
        """
        range_format = RangeFormat.from_specifier(specifier)
        if range_format is None:
            return None

        return self._renderers[range_format](version_range)

    def _lower_bound(self, version_range: VersionRange) -> str:
        if version_range.min_version is None:
            return ""

        return _format_version(version_range.min_version)

    def _upper_bound(self, version_range: VersionRange) -> str:
        if version_range.max_version is None:
            return ""

        return _format_version(version_range.max_version)

    def _short_string(self, version_range: VersionRange) -> str:
        # Unlike S, a floating lower bound keeps its version text here.
        shorthand = self._shorthand(version_range, floating=False)
        if shorthand is not None:
            return shorthand

        return self._normalized_string(version_range)

    def _to_string(self, version_range: VersionRange) -> str:
        shorthand = self._shorthand(version_range, floating=True)
        if shorthand is not None:
            return shorthand

        return self._normalized_string(version_range)

    def _legacy_short_string(self, version_range: VersionRange) -> str:
        shorthand = self._shorthand(version_range, floating=False)
        if shorthand is not None:
            return shorthand

        return self._legacy_string(version_range)

    def _shorthand(self, version_range: VersionRange, floating: bool) -> str | None:
        min_version = version_range.min_version
        max_version = version_range.max_version

        if (
            min_version is not None
            and version_range.include_min
            and max_version is None
        ):
            if floating and version_range.is_floating:
                return str(version_range.float_range)

            return _format_version(min_version)

        # Floating is ignored for exact versions.
        if (
            min_version is not None
            and max_version is not None
            and version_range.include_min
            and version_range.include_max
            and min_version == max_version
        ):
            return f"[{_format_version(min_version)}]"

        return None

    def _normalized_string(self, version_range: VersionRange) -> str:
        return self._bracket_string(version_range)

    def _legacy_string(self, version_range: VersionRange) -> str:
        """
        Legacy tools predate floating ranges and only ever see the bounds.
        """
        return self._bracket_string(version_range)

    def _bracket_string(self, version_range: VersionRange) -> str:
        min_version = version_range.min_version
        max_version = version_range.max_version

        text = "[" if min_version is not None and version_range.include_min else "("

        if min_version is not None:
            text += _format_version(min_version)

        text += ", "

        if max_version is not None:
            text += _format_version(max_version)

        text += "]" if max_version is not None and version_range.include_max else ")"

        return text

    def _pretty_print(self, version_range: VersionRange) -> str:
        min_version = version_range.min_version
        max_version = version_range.max_version

        # empty range
        if min_version is None and max_version is None:
            return ""

        # single version
        if (
            min_version is not None
            and max_version is not None
            and max_version == min_version
            and version_range.include_min
            and version_range.include_max
        ):
            return f"(= {_format_version(min_version)})"

        text = "("

        if min_version is not None:
            text += _pretty_print_bound(min_version, version_range.include_min, ">")

        if min_version is not None and max_version is not None:
            text += " && "

        if max_version is not None:
            text += _pretty_print_bound(max_version, version_range.include_max, "<")

        return text + ")"


def _format_version(version: Version) -> str:
    return version.to_normalized_string()


def _pretty_print_bound(version: Version, inclusive: bool, operator: str) -> str:
    if inclusive:
        operator += "="

    return f"{operator} {_format_version(version)}"


_formatter = VersionRangeFormatter()


def format_version_range(version_range: VersionRange | None, fmt: str) -> str:
    return _formatter.format(version_range, fmt)
