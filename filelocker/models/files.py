"""
File and group domain models.
"""

from dataclasses import dataclass
from typing import Self
from xml.etree.ElementTree import Element


@dataclass(frozen=True, kw_only=True)
class File:
    """
    A file stored in Filelocker.

    Snapshot of server state at query time.
    """

    file_id: str
    name: str
    size: int = 0
    passed_av_scan: bool = False

    @classmethod
    def from_element(cls, element: Element) -> Self:
        """Build from a ``<file id=".." name=".." size=".." passedAvScan=".."/>`` element."""
        return cls(
            file_id=element.get("id", ""),
            name=element.get("name", ""),
            size=_parse_int(element.get("size")),
            passed_av_scan=_parse_bool(element.get("passedAvScan")),
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary representation."""
        return {
            "id": self.file_id,
            "name": self.name,
            "size": self.size,
            "passed_av_scan": self.passed_av_scan,
        }


@dataclass(frozen=True, kw_only=True)
class Group:
    """A user's group."""

    group_id: str
    name: str

    @classmethod
    def from_element(cls, element: Element) -> Self:
        return cls(group_id=element.get("id", ""), name=element.get("name", ""))

    def to_dict(self) -> dict[str, object]:
        return {"id": self.group_id, "name": self.name}


def _parse_int(value: str | None) -> int:
    if not value:
        return 0
    return int(value)


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("true", "1", "yes")


def format_size(size_bytes: int) -> str:
    """Format byte size in human-readable form."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            if unit == "B":
                return f"{int(size)} {unit}"
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"
