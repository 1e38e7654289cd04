"""Reading of `.sdkmanrc` files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SDKInfo:
    """One SDK entry from a `.sdkmanrc` file."""

    type: str
    version: str
    vendor: str


def _parse_line(line: str) -> SDKInfo | None:
    content = line.split("#", 1)[0]
    if not content.strip():
        return None

    key, sep, value = content.partition("=")
    if not sep:
        raise ValueError(f"unable to split key/value from {content!r}")

    version, vendor = "", ""
    if value.strip():
        version, _, vendor = value.partition("-")

    return SDKInfo(
        type=key.strip().lower(),
        version=version.strip(),
        vendor=vendor.strip().lower(),
    )


def read_sdkmanrc(path):
    """Return the SDKs listed in the `.sdkmanrc` file at path, in file order."""
    contents = Path(path).read_text(encoding="utf-8", errors="replace")
    return [
        info
        for info in (_parse_line(line) for line in contents.split("\n") if line.strip())
        if info is not None
    ]