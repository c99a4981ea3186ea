from __future__ import annotations

import enum

from typing import TYPE_CHECKING

from rangefmt.exceptions import ParseVersionError
from rangefmt.version.patterns import COMPLETE_VERSION


if TYPE_CHECKING:
    from collections.abc import Sequence


class VersionComparison(enum.Enum):
    VERSION = "version"
    VERSION_RELEASE = "version-release"
    VERSION_RELEASE_METADATA = "version-release-metadata"


class Version:
    """
    A parsed version number.

    Up to four numeric parts are supported (major, minor, patch and revision),
    followed by optional dot separated release labels and build metadata,
    e.g. ``1.2.3.4-beta.1+abc``.
    """

    def __init__(
        self,
        major: int,
        minor: int = 0,
        patch: int = 0,
        revision: int = 0,
        release_labels: Sequence[str] | None = None,
        metadata: str | None = None,
        text: str | None = None,
    ) -> None:
        self._major = int(major)
        self._minor = int(minor)
        self._patch = int(patch)
        self._revision = int(revision)
        self._release_labels = tuple(release_labels or ())
        self._metadata = metadata or None

        if text is None:
            text = self.to_normalized_string()

        self._text = text

    @classmethod
    def parse(cls, text: str) -> Version:
        if not isinstance(text, str):
            raise ParseVersionError(f'Unable to parse "{text}".')

        match = COMPLETE_VERSION.match(text.strip())
        if match is None:
            raise ParseVersionError(f'Unable to parse "{text}".')

        major, minor, patch, revision, release, metadata = match.groups()

        return cls(
            int(major),
            int(minor or 0),
            int(patch or 0),
            int(revision or 0),
            release.split(".") if release else None,
            metadata,
            text.strip(),
        )

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def release_labels(self) -> tuple[str, ...]:
        return self._release_labels

    @property
    def release(self) -> str:
        return ".".join(self._release_labels)

    @property
    def metadata(self) -> str | None:
        return self._metadata

    @property
    def text(self) -> str:
        return self._text

    def is_prerelease(self) -> bool:
        return len(self._release_labels) > 0

    def has_metadata(self) -> bool:
        return self._metadata is not None

    def to_version_string(self) -> str:
        """
        The numeric part of the version, omitting a zero revision.
        """
        text = f"{self._major}.{self._minor}.{self._patch}"
        if self._revision > 0:
            text += f".{self._revision}"

        return text

    def to_normalized_string(self) -> str:
        text = self.to_version_string()

        if self.is_prerelease():
            text += f"-{self.release}"

        if self.has_metadata():
            text += f"+{self._metadata}"

        return text

    def compare(
        self,
        other: Version,
        mode: VersionComparison = VersionComparison.VERSION_RELEASE,
    ) -> int:
        result = _cmp(
            (self._major, self._minor, self._patch, self._revision),
            (other.major, other.minor, other.patch, other.revision),
        )
        if result != 0 or mode is VersionComparison.VERSION:
            return result

        result = self._compare_release(other)
        if result != 0 or mode is VersionComparison.VERSION_RELEASE:
            return result

        return _cmp(
            (self._metadata or "").lower(),
            (other.metadata or "").lower(),
        )

    def equals(
        self,
        other: Version,
        mode: VersionComparison = VersionComparison.VERSION_RELEASE,
    ) -> bool:
        return self.compare(other, mode) == 0

    def _compare_release(self, other: Version) -> int:
        # A release version has a higher precedence than its prereleases.
        if not self.is_prerelease() or not other.is_prerelease():
            return _cmp(not self.is_prerelease(), not other.is_prerelease())

        for mine, theirs in zip(self._release_labels, other.release_labels):
            result = _compare_label(mine, theirs)
            if result != 0:
                return result

        return _cmp(len(self._release_labels), len(other.release_labels))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(
            (
                self._major,
                self._minor,
                self._patch,
                self._revision,
                tuple(_hash_label(label) for label in self._release_labels),
            )
        )

    def __str__(self) -> str:
        return self.to_normalized_string()

    def __repr__(self) -> str:
        return f"<Version {self}>"


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def _hash_label(label: str) -> str:
    return str(int(label)) if label.isdigit() else label.lower()


def _compare_label(a: str, b: str) -> int:
    a_numeric = a.isdigit()
    b_numeric = b.isdigit()

    if a_numeric and b_numeric:
        return _cmp(int(a), int(b))

    # Numeric identifiers always have lower precedence.
    if a_numeric or b_numeric:
        return -1 if a_numeric else 1

    return _cmp(a.lower(), b.lower())
