"""
AppInfo Model — identity and storage naming for uploaded app packages.

Every uploaded IPA or APK gets exactly one AppInfo record. The record carries
the metadata reported by the parser plus a fresh UUID, and knows the relative
storage names of its package binary and (optional) PNG icon.
"""

from __future__ import annotations

import logging
import posixpath
import re
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum

from appshelf.models.package import MetaValue, Package

logger = logging.getLogger(__name__)


class UnsupportedPackageError(ValueError):
    """Raised when a record is requested for a file kind appshelf cannot store."""


class AppKind(IntEnum):
    """Package kind, serialized as its integer value."""

    IPA = 0
    APK = 1
    UNKNOWN = -1

    @property
    def storage_suffix(self) -> str:
        """Suffix appended to storage names. UNKNOWN has no leading dot."""
        return _SUFFIXES.get(self, "unknown")

    @classmethod
    def from_filename(cls, filename: str) -> "AppKind":
        return file_kind(filename)


_SUFFIXES = {
    AppKind.IPA: ".ipa",
    AppKind.APK: ".apk",
}
_EXTENSIONS = {suffix: kind for kind, suffix in _SUFFIXES.items()}


def file_kind(filename: str) -> AppKind:
    """Classify a filename by its extension, case-insensitively. Never raises."""
    base = filename.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    ext = base[dot:].lower() if dot >= 0 else ""
    return _EXTENSIONS.get(ext, AppKind.UNKNOWN)


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


# Go-style RFC 3339 timestamps carry 1-9 fraction digits and may end in "Z"
_FRACTION_RE = re.compile(r"\.(\d+)")


def _parse_date(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # fromisoformat on 3.10 only takes 3 or 6 fraction digits
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    return datetime.fromisoformat(text)


@dataclass(frozen=True)
class AppInfo:
    """
    Metadata record for one uploaded package.

    Records are immutable. ``storage_name`` is computed once by ``create``;
    records loaded from older data may leave it empty, in which case
    ``package_storage_name`` falls back to ``<identifier>/<id><suffix>``.
    """

    id: str
    name: str = ""
    version: str = ""
    identifier: str = ""
    build: str = ""
    channel: str = ""
    date: datetime = field(default_factory=_now)
    size: int = 0
    none_icon: bool = False
    type: AppKind = AppKind.UNKNOWN
    meta_data: dict[str, MetaValue] = field(default_factory=dict)
    storage_name: str = ""

    @classmethod
    def create(
        cls,
        package: Package,
        kind: AppKind,
        *,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> "AppInfo":
        """
        Build the record for a freshly parsed package.

        The storage name embeds identifier, version, build and channel for
        readability, and the new id for uniqueness:
        ``<identifier>_<version>(<build>)[_<channel>]_<id><suffix>``.
        """
        kind = AppKind(kind)
        if kind is AppKind.UNKNOWN:
            raise UnsupportedPackageError(
                f"Cannot create a record for package {package.identifier!r} of unknown kind"
            )

        app_id = (id_factory or _new_id)()
        channel = package.channel
        channel_suffix = f"_{channel}" if channel else ""
        storage_name = (
            f"{package.identifier}_{package.version}({package.build})"
            f"{channel_suffix}_{app_id}{kind.storage_suffix}"
        )

        info = cls(
            id=app_id,
            name=package.name,
            version=package.version,
            identifier=package.identifier,
            build=package.build,
            channel=channel,
            date=(clock or _now)(),
            size=package.size,
            none_icon=package.icon is None,
            type=kind,
            meta_data=dict(package.meta_data),
            storage_name=storage_name,
        )
        logger.debug(f"Created record {app_id} for {info.identifier} ({kind.name}) -> {storage_name}")
        return info

    def icon_storage_name(self) -> str:
        """Relative path of the PNG icon, or "" when the package has no icon."""
        if self.none_icon:
            return ""
        return posixpath.join(self.identifier, f"{self.id}.png")

    def package_storage_name(self) -> str:
        """Relative path of the package binary."""
        if self.storage_name:
            return self.storage_name
        return posixpath.join(self.identifier, self.id + self.type.storage_suffix)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary with camelCase keys."""
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "identifier": self.identifier,
            "build": self.build,
            "channel": self.channel,
            "date": self.date.isoformat(),
            "size": self.size,
            "noneIcon": self.none_icon,
            "type": int(self.type),
            "metaData": self.meta_data,
            "storageName": self.storage_name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppInfo":
        """
        Deserialize from a dictionary, tolerating legacy payloads.

        Missing or null keys take their zero value, so an untyped legacy
        record is an IPA.
        """
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            version=data.get("version") or "",
            identifier=data.get("identifier") or "",
            build=data.get("build") or "",
            channel=data.get("channel") or "",
            date=_parse_date(data["date"]) if data.get("date") else _now(),
            size=int(data.get("size") or 0),
            none_icon=bool(data.get("noneIcon")),
            type=AppKind(int(data.get("type") or AppKind.IPA)),
            meta_data=data.get("metaData") or {},
            storage_name=data.get("storageName") or "",
        )


def new_app_info(package: Package, kind: AppKind, **kwargs) -> AppInfo:
    """Shorthand for ``AppInfo.create``."""
    return AppInfo.create(package, kind, **kwargs)


def sort_by_recency(records: list[AppInfo]) -> None:
    """Sort records in place, most recently uploaded first."""
    records.sort(key=lambda record: record.date, reverse=True)
