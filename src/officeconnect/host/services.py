"""Interfaces of the host services the plugin consumes.

The host platform owns every implementation except localization and link
building, which the plugin ships itself (see ``l10n`` and ``urls``). All
methods are synchronous and expected to be idempotent.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class ResolvedFile:
    """A file handle inside a user's personal file tree."""

    id: int
    name: str
    owner_id: str | None = None


@runtime_checkable
class FileLookupService(Protocol):
    def get_file_by_id(self, user_id: str, file_id: int) -> ResolvedFile | None:
        """Return the file with *file_id* in *user_id*'s tree, or None.

        Raises whatever the host raises when the storage backend fails.
        """
        ...


@runtime_checkable
class AccessListService(Protocol):
    def get_access_list(self, file: ResolvedFile) -> set[str]:
        """Return the ids of users currently allowed to access *file*."""
        ...


@runtime_checkable
class UserDirectoryService(Protocol):
    def get_display_name(self, user_id: str) -> str | None:
        """Return the display name of *user_id*, or None for unknown users."""
        ...


@runtime_checkable
class LocalizationService(Protocol):
    def translate(self, template: str, args: Mapping[str, Any], language_code: str) -> str:
        ...


@runtime_checkable
class LinkBuilderService(Protocol):
    def image_path(self, app: str, image: str) -> str:
        ...

    def get_absolute_url(self, path: str) -> str:
        ...

    def link_to_route_absolute(self, route: str, params: Mapping[str, Any]) -> str:
        ...


@runtime_checkable
class KeyValueStore(Protocol):
    """Small plugin-owned key/value storage provided by the host."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...
