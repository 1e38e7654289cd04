"""Listing of JAR files that follow Maven naming conventions."""

from __future__ import annotations

import hashlib
import os
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Iterator

_MAVEN = re.compile(r".+/(.*)-(\d.*)\.jar", re.ASCII)
_CHUNK = 1 << 16


@dataclass(frozen=True, order=True)
class MavenJAR:
    """Name, version and SHA-256 of a JAR; ordering is by those fields in turn."""

    name: str
    version: str
    sha256: str


def _walk_error(root: str, err: OSError) -> None:
    """Stop a directory walk, reporting which root failed."""
    raise OSError(f"error walking path {root}: {err}") from err


def _jar_paths(roots: tuple[str, ...]) -> Iterator[str]:
    for root in roots:
        try:
            resolved = Path(root).resolve(strict=True)
        except FileNotFoundError:
            continue
        except OSError as err:
            raise OSError(f"unable to resolve {root}: {err}") from err

        if not resolved.is_dir():
            if resolved.suffix == ".jar":
                yield str(resolved)
            continue

        for directory, dirnames, filenames in os.walk(
            resolved, onerror=partial(_walk_error, root)
        ):
            dirnames.sort()
            for filename in sorted(filenames):
                if os.path.splitext(filename)[1] == ".jar":
                    yield os.path.join(directory, filename)


def _describe(path: str) -> MavenJAR:
    name, version = os.path.basename(path), "unknown"
    match = _MAVEN.search(path.replace(os.sep, "/"))
    if match:
        name, version = match.group(1), match.group(2)

    digest = hashlib.sha256()
    try:
        with open(path, "rb") as stream:
            for chunk in iter(lambda: stream.read(_CHUNK), b""):
                digest.update(chunk)
    except OSError as err:
        raise OSError(f"unable to hash file {path}: {err}") from err

    return MavenJAR(name=name, version=version, sha256=digest.hexdigest())


def new_maven_jar_listing(*args):
    """Describe every JAR under the given roots, sorted by name, version and hash.

    Roots that do not exist are skipped.
    """
    paths = list(_jar_paths(args))
    try:
        with ThreadPoolExecutor() as pool:
            jars = list(pool.map(_describe, paths))
    except OSError as err:
        raise OSError(f"unable to create file listing: {err}") from err
    return sorted(jars)