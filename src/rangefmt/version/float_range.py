from __future__ import annotations

import enum

from rangefmt.exceptions import ParseVersionError
from rangefmt.version.patterns import FLOAT_NUMERIC
from rangefmt.version.patterns import FLOAT_RELEASE
from rangefmt.version.version import Version


class FloatBehavior(enum.Enum):
    NONE = "none"
    PRERELEASE = "prerelease"
    REVISION = "revision"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"
    ABSOLUTE_LATEST = "absolute-latest"
    PRERELEASE_REVISION = "prerelease-revision"
    PRERELEASE_PATCH = "prerelease-patch"
    PRERELEASE_MINOR = "prerelease-minor"
    PRERELEASE_MAJOR = "prerelease-major"


# Number of fixed numeric parts in front of the wildcard.
_NUMERIC_BEHAVIORS = {
    0: (FloatBehavior.MAJOR, FloatBehavior.PRERELEASE_MAJOR),
    1: (FloatBehavior.MINOR, FloatBehavior.PRERELEASE_MINOR),
    2: (FloatBehavior.PATCH, FloatBehavior.PRERELEASE_PATCH),
    3: (FloatBehavior.REVISION, FloatBehavior.PRERELEASE_REVISION),
}


class FloatRange:
    """
    A floating lower bound such as ``1.*`` or ``1.0.0-beta*``.

    The wildcard matches the highest available version sharing the fixed
    prefix; ``min_version`` is the lowest version it can ever match.
    """

    def __init__(
        self,
        behavior: FloatBehavior,
        min_version: Version | None = None,
        release_prefix: str | None = None,
    ) -> None:
        self._behavior = behavior
        self._min_version = min_version or Version(0, 0, 0)
        self._release_prefix = release_prefix

        if self._release_prefix is None and self.floats_prerelease():
            self._release_prefix = self._min_version.release

    @classmethod
    def parse(cls, text: str) -> FloatRange:
        text = text.strip()

        if "*" not in text:
            return cls(FloatBehavior.NONE, Version.parse(text))

        if text == "*-*":
            return cls(FloatBehavior.ABSOLUTE_LATEST, Version(0, 0, 0, 0, ["0"]), "")

        numeric, dash, release = text.partition("-")

        if dash:
            release_match = FLOAT_RELEASE.match(release)
            if release_match is None:
                raise ParseVersionError(f'Invalid floating version "{text}".')

            prefix = release_match.group(1)

        numeric_match = FLOAT_NUMERIC.match(numeric)
        if numeric_match is None:
            if not dash or "*" in numeric:
                raise ParseVersionError(f'Invalid floating version "{text}".')

            # A fixed version with a floating release label, e.g. 1.0.0-beta*
            version = Version.parse(numeric)
            return cls(
                FloatBehavior.PRERELEASE,
                _with_release(version, prefix),
                prefix,
            )

        fixed = numeric_match.group(1)
        parts = [int(part) for part in fixed.split(".")] if fixed else []
        behavior, prerelease_behavior = _NUMERIC_BEHAVIORS[len(parts)]
        version = Version(*(parts or [0]))

        if not dash:
            return cls(behavior, version)

        return cls(prerelease_behavior, _with_release(version, prefix), prefix)

    @property
    def behavior(self) -> FloatBehavior:
        return self._behavior

    @property
    def min_version(self) -> Version:
        return self._min_version

    @property
    def release_prefix(self) -> str | None:
        return self._release_prefix

    def floats_prerelease(self) -> bool:
        return self._behavior in {
            FloatBehavior.PRERELEASE,
            FloatBehavior.ABSOLUTE_LATEST,
            FloatBehavior.PRERELEASE_REVISION,
            FloatBehavior.PRERELEASE_PATCH,
            FloatBehavior.PRERELEASE_MINOR,
            FloatBehavior.PRERELEASE_MAJOR,
        }

    def __str__(self) -> str:
        version = self._min_version
        behavior = self._behavior
        release = f"-{self._release_prefix}*"

        if behavior is FloatBehavior.NONE:
            return version.to_normalized_string()

        if behavior is FloatBehavior.ABSOLUTE_LATEST:
            return "*-*"

        if behavior is FloatBehavior.PRERELEASE:
            return version.to_version_string() + release

        if behavior in {FloatBehavior.REVISION, FloatBehavior.PRERELEASE_REVISION}:
            text = f"{version.major}.{version.minor}.{version.patch}.*"
        elif behavior in {FloatBehavior.PATCH, FloatBehavior.PRERELEASE_PATCH}:
            text = f"{version.major}.{version.minor}.*"
        elif behavior in {FloatBehavior.MINOR, FloatBehavior.PRERELEASE_MINOR}:
            text = f"{version.major}.*"
        else:
            text = "*"

        if self.floats_prerelease():
            text += release

        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatRange):
            return NotImplemented

        return (
            self._behavior is other.behavior
            and self._min_version == other.min_version
            and (self._release_prefix or "") == (other.release_prefix or "")
        )

    def __hash__(self) -> int:
        return hash((self._behavior, self._min_version, self._release_prefix or ""))

    def __repr__(self) -> str:
        return f"<FloatRange {self}>"


def _with_release(version: Version, prefix: str) -> Version:
    # The lowest label a prefix can match, e.g. "beta" for "beta*" and
    # "beta.0" for "beta.*".
    if not prefix:
        label = "0"
    elif prefix.endswith("."):
        label = prefix + "0"
    else:
        label = prefix

    return Version(
        version.major,
        version.minor,
        version.patch,
        version.revision,
        label.split("."),
    )
