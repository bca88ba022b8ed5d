"""
Catalog presentation helpers.

Turns a flat list of AppInfo records into the shape the download page shows:
one entry per app identifier with its newest upload on top, the platform tags
for every kind ever uploaded under that identifier, and human-readable sizes.
"""

from dataclasses import dataclass, field

from appshelf.models.appinfo import AppInfo, AppKind, sort_by_recency

KB = 1024
MB = 1024 * KB
GB = 1024 * MB

PLATFORM_TAGS = {
    AppKind.IPA: "ios",
    AppKind.APK: "android",
}


@dataclass
class AppGroup:
    """All uploads sharing one app identifier, newest first."""

    identifier: str
    history: list[AppInfo] = field(default_factory=list)

    @property
    def latest(self) -> AppInfo:
        return self.history[0]


def size_str(size: int) -> str:
    """Format a byte count as "x.xx KB/MB/GB" (1024-based)."""
    if size > GB:
        return f"{size / GB:.2f} GB"
    if size > MB:
        return f"{size / MB:.2f} MB"
    return f"{size / KB:.2f} KB"


def group_by_identifier(records: list[AppInfo]) -> list[AppGroup]:
    """
    Group records by identifier.

    Each group's history is sorted by recency, and groups are ordered by
    their latest upload. The input list is left untouched.
    """
    groups: dict[str, AppGroup] = {}
    for record in records:
        groups.setdefault(record.identifier, AppGroup(identifier=record.identifier)).history.append(record)

    for group in groups.values():
        sort_by_recency(group.history)

    return sorted(groups.values(), key=lambda g: g.latest.date, reverse=True)


def platform_tags(group: AppGroup) -> list[str]:
    """Platform tags ("ios", "android") present in a group, ios first."""
    tags = {PLATFORM_TAGS[r.type] for r in group.history if r.type in PLATFORM_TAGS}
    return sorted(tags, reverse=True)
