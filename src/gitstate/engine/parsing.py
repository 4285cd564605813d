"""Parsers for git's machine-readable output.

Formats are requested with a unit separator (0x1f) between fields so that
free text such as tag or stash messages can contain any printable
character. Lines that do not fit the requested shape raise ParseFailure.
"""

import re
from datetime import datetime

from gitstate.errors import ParseFailure
from gitstate.models.stash import Stash
from gitstate.models.tag import Tag

FIELD_SEP = "\x1f"

TAG_FORMAT = "%1f".join(
    [
        "%(refname:short)",
        "%(objectname)",
        "%(objecttype)",
        "%(*objectname)",
        "%(taggername)",
        "%(taggeremail)",
        "%(creatordate:iso-strict)",
        "%(contents:subject)",
    ]
)

STASH_FORMAT = "%x1f".join(["%gd", "%H", "%gs", "%cI"])

_STASH_SELECTOR = re.compile(r"^stash@\{(\d+)\}$")
_STASH_SUBJECT = re.compile(r"^(?:WIP on|On) (?P<branch>[^:]+):")


def parse_git_date(value: str, operation: str) -> datetime | None:
    """Parse a strict ISO 8601 date from git; empty means no date."""
    value = value.strip()
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise ParseFailure(operation, value, "invalid date") from None


def parse_tag_lines(output: str) -> list[Tag]:
    """Parse `git for-each-ref --format=TAG_FORMAT refs/tags` output.

    For annotated tags the target is the peeled commit (%(*objectname)),
    for lightweight tags it is the ref's own object.
    """
    tags: list[Tag] = []
    for line in output.splitlines():
        if not line.strip():
            continue

        parts = line.split(FIELD_SEP)
        if len(parts) < 3 or not parts[0] or not parts[1]:
            raise ParseFailure("list tags", line, "expected name, object and type")

        parts += [""] * (8 - len(parts))
        name, sha, object_type, peeled, tagger, email, date_str, subject = parts[:8]
        is_annotated = object_type == "tag"

        tags.append(
            Tag(
                name=name,
                target_sha=peeled if is_annotated and peeled else sha,
                is_annotated=is_annotated,
                message=(subject or None) if is_annotated else None,
                tagger=tagger or None,
                tagger_email=email.strip("<>") or None,
                date=parse_git_date(date_str, "list tags"),
            )
        )
    return tags


def parse_stash_lines(output: str) -> list[Stash]:
    """Parse `git stash list --format=STASH_FORMAT` output.

    Indices come from git's own `stash@{n}` selectors, never from line
    position.
    """
    stashes: list[Stash] = []
    for line in output.splitlines():
        if not line.strip():
            continue

        parts = line.split(FIELD_SEP)
        if len(parts) != 4:
            raise ParseFailure("list stashes", line, "expected 4 fields")

        selector, sha, subject, date_str = parts
        match = _STASH_SELECTOR.match(selector)
        if match is None:
            raise ParseFailure("list stashes", line, f"bad stash selector {selector!r}")

        date = parse_git_date(date_str, "list stashes")
        if date is None:
            raise ParseFailure("list stashes", line, "missing date")

        branch_match = _STASH_SUBJECT.match(subject)
        branch = branch_match.group("branch") if branch_match else None
        if branch == "(no branch)":
            branch = None

        stashes.append(
            Stash(
                index=int(match.group(1)),
                message=subject,
                sha=sha,
                date=date,
                branch_name=branch,
            )
        )
    return stashes


def parse_single_line(output: str, operation: str) -> str:
    """Return the one non-empty line git printed, e.g. a sha."""
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if len(lines) != 1:
        raise ParseFailure(operation, output, "expected exactly one line")
    return lines[0]


def has_conflict(stdout: str, stderr: str) -> bool:
    """True if git reported merge conflicts."""
    return "CONFLICT" in stdout or "CONFLICT" in stderr
