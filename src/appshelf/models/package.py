"""
Package capability — what the parsing collaborator hands to appshelf.

Any parser (IPA, APK, or a future format) that exposes these read-only
properties can be turned into an AppInfo record. No base class is required.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Union, runtime_checkable

# JSON-like payload carried verbatim in AppInfo.meta_data
MetaValue = Union[str, int, float, bool, None, list, dict]


@runtime_checkable
class Package(Protocol):
    """
    Protocol for an already-parsed application package.

    ``icon`` is whatever image object the parser produced, or ``None`` when
    the bundle carries no icon. appshelf never decodes it.
    """

    @property
    def name(self) -> str: ...

    @property
    def version(self) -> str: ...

    @property
    def identifier(self) -> str: ...

    @property
    def build(self) -> str: ...

    @property
    def channel(self) -> str: ...

    @property
    def meta_data(self) -> dict[str, MetaValue]: ...

    @property
    def icon(self) -> Any | None: ...

    @property
    def size(self) -> int: ...


@dataclass(frozen=True)
class ParsedPackage:
    """Plain value implementation of the Package protocol."""

    name: str
    version: str
    identifier: str
    build: str
    channel: str = ""
    meta_data: dict[str, MetaValue] = field(default_factory=dict)
    icon: Any | None = None
    size: int = 0
