from __future__ import annotations

from rangefmt.formatting.formatter import RangeFormat
from rangefmt.formatting.formatter import VersionRangeFormatter
from rangefmt.formatting.formatter import format_version_range
from rangefmt.version.float_range import FloatBehavior
from rangefmt.version.float_range import FloatRange
from rangefmt.version.version import Version
from rangefmt.version.version import VersionComparison
from rangefmt.version.version_range import VersionRange


__all__ = [
    "FloatBehavior",
    "FloatRange",
    "RangeFormat",
    "Version",
    "VersionComparison",
    "VersionRange",
    "VersionRangeFormatter",
    "format_version_range",
]
