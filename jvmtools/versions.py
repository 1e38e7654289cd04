"""Helpers for classifying Java version strings."""

from __future__ import annotations

import re
from typing import NamedTuple

_VERSION = re.compile(
    r"^v?(?P<major>[0-9]+)(?:\.(?P<minor>[0-9]+))?(?:\.(?P<patch>[0-9]+))?"
    r"(?:-(?P<pre>[0-9A-Za-z\-]+(?:\.[0-9A-Za-z\-]+)*))?"
    r"(?:\+(?P<meta>[0-9A-Za-z\-]+(?:\.[0-9A-Za-z\-]+)*))?$",
    re.ASCII,
)


class _Version(NamedTuple):
    major: int
    minor: int
    patch: int
    prerelease: str


def _parse(candidate: str) -> _Version | None:
    """Parse a loose semantic version, returning None when it is not one."""
    match = _VERSION.match(candidate)
    if match is None:
        return None
    prerelease = match.group("pre") or ""
    if prerelease:
        for part in prerelease.split("."):
            if part.isdigit() and len(part) > 1 and part.startswith("0"):
                return None
    return _Version(
        int(match.group("major")),
        int(match.group("minor") or 0),
        int(match.group("patch") or 0),
        prerelease,
    )


def _is_before(candidate: str, major: int) -> bool:
    version = _parse(candidate)
    if version is None:
        return False
    core = (version.major, version.minor, version.patch)
    target = (major, 0, 0)
    if core != target:
        return core < target
    # A pre-release sorts before the release it precedes.
    return bool(version.prerelease)


def is_before_java9(candidate):
    """Return True if the version is older than Java 9; False if unparseable."""
    return _is_before(candidate, 9)


def is_before_java17(candidate):
    """Return True if the version is older than Java 17; False if unparseable."""
    return _is_before(candidate, 17)


def is_before_java18(candidate):
    """Return True if the version is older than Java 18; False if unparseable."""
    return _is_before(candidate, 18)