"""Tag and semantic version data models."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from functools import total_ordering

_VERSION_TAG_PATTERN = re.compile(r"^v?\d+\.\d+(\.\d+)?(-[\w.]+)?$")


@total_ordering
@dataclass(frozen=True)
class SemanticVersion:
    """major.minor.patch with optional prerelease and build metadata.

    A prerelease sorts below the matching release; build metadata is
    ignored for ordering and equality.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = field(default=None, compare=False)

    @staticmethod
    def parse(text: str) -> "SemanticVersion | None":
        """Parse "v1.2.3-rc.1+build.5" style strings.

        Returns None unless at least major.minor are present and numeric.
        """
        if text[:1] in ("v", "V"):
            text = text[1:]

        build: str | None = None
        if "+" in text:
            text, build = text.split("+", 1)

        prerelease: str | None = None
        if "-" in text:
            text, prerelease = text.split("-", 1)

        parts = text.split(".")
        if len(parts) < 2 or len(parts) > 3 or not all(p.isdigit() for p in parts):
            return None

        return SemanticVersion(
            major=int(parts[0]),
            minor=int(parts[1]),
            patch=int(parts[2]) if len(parts) == 3 else 0,
            prerelease=prerelease or None,
            build=build or None,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if mine != theirs:
            return mine < theirs
        if self.prerelease is None:
            return False
        if other.prerelease is None:
            return True
        return self.prerelease < other.prerelease

    def __str__(self) -> str:
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            result += f"-{self.prerelease}"
        if self.build:
            result += f"+{self.build}"
        return result


@dataclass(frozen=True, eq=False)
class Tag:
    """A git tag.

    Tag names are unique within a repository, so two Tag values are equal
    when their names are equal.
    """

    name: str
    target_sha: str
    is_annotated: bool = False
    message: str | None = None
    tagger: str | None = None
    tagger_email: str | None = None
    date: datetime | None = None

    @property
    def short_sha(self) -> str:
        return self.target_sha[:7]

    @property
    def is_version_tag(self) -> bool:
        """True for names like v1.0, 1.2.3 or v2.0.0-beta.1."""
        return _VERSION_TAG_PATTERN.match(self.name) is not None

    @property
    def version(self) -> SemanticVersion | None:
        return SemanticVersion.parse(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)
