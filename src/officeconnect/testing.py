"""Test scaffolding for code that runs against a ``Host``.

``FakeHostBuilder`` is a fluent factory for in-memory hosts. Each host service
is wrapped in ``MagicMock(wraps=...)``, so tests can both rely on realistic
behaviour and assert on calls::

    host = (
        FakeHostBuilder()
        .with_user("alice", "Alice Liddell")
        .with_file("alice", 42, "report.docx", shared_with=["bob"])
        .build()
    )
    notifier = Notifier("officeconnect", host)
    host.files.get_file_by_id.assert_not_called()
"""

from __future__ import annotations

from collections.abc import Iterable
from unittest.mock import MagicMock

from .host.host_builder import Host, HostFeatures, make_host
from .host.l10n import CatalogLocalization
from .host.services import ResolvedFile
from .host.urls import RouteLinkBuilder
from .keys import InMemoryKeyValueStore


class _FakeFiles:
    def __init__(self, files: dict[tuple[str, int], ResolvedFile], errors: dict[tuple[str, int], Exception]) -> None:
        self._files = files
        self._errors = errors

    def get_file_by_id(self, user_id: str, file_id: int) -> ResolvedFile | None:
        exc = self._errors.get((user_id, file_id))
        if exc is not None:
            raise exc
        return self._files.get((user_id, file_id))


class _FakeShares:
    def __init__(self, access: dict[int, set[str]]) -> None:
        self._access = access

    def get_access_list(self, file: ResolvedFile) -> set[str]:
        return set(self._access.get(file.id, set()))


class _FakeUsers:
    def __init__(self, names: dict[str, str]) -> None:
        self._names = names

    def get_display_name(self, user_id: str) -> str | None:
        return self._names.get(user_id)


class FakeHostBuilder:
    """Fluent builder for an in-memory ``Host``."""

    def __init__(self, app_name: str = "officeconnect", base_url: str = "https://cloud.example.com") -> None:
        self._app_name = app_name
        self._base_url = base_url
        self._files: dict[tuple[str, int], ResolvedFile] = {}
        self._errors: dict[tuple[str, int], Exception] = {}
        self._access: dict[int, set[str]] = {}
        self._names: dict[str, str] = {}
        self._features = HostFeatures()
        self._with_keys = False

    def build(self) -> Host:
        """Build and return the configured host."""
        urls = RouteLinkBuilder(
            self._base_url,
            {f"{self._app_name}.editor.index": f"/apps/{self._app_name}/{{fileId}}"},
        )
        return make_host(
            app_name=self._app_name,
            files=MagicMock(wraps=_FakeFiles(self._files, self._errors)),
            shares=MagicMock(wraps=_FakeShares(self._access)),
            users=MagicMock(wraps=_FakeUsers(self._names)),
            l10n=MagicMock(wraps=CatalogLocalization()),
            urls=MagicMock(wraps=urls),
            keys=InMemoryKeyValueStore() if self._with_keys else None,
            features=self._features,
        )

    def with_user(self, user_id: str, display_name: str) -> "FakeHostBuilder":
        self._names[user_id] = display_name
        return self

    def with_file(
        self,
        user_id: str,
        file_id: int,
        name: str,
        *,
        shared_with: Iterable[str] = (),
    ) -> "FakeHostBuilder":
        """Place a file in *user_id*'s tree; the owner always has access."""
        self._files[(user_id, file_id)] = ResolvedFile(id=file_id, name=name, owner_id=user_id)
        self._access.setdefault(file_id, set()).update({user_id, *shared_with})
        return self

    def with_lookup_error(self, user_id: str, file_id: int, exc: Exception) -> "FakeHostBuilder":
        """Make ``files.get_file_by_id(user_id, file_id)`` raise *exc*."""
        self._errors[(user_id, file_id)] = exc
        return self

    def revoke_access(self, file_id: int, user_id: str) -> "FakeHostBuilder":
        self._access.get(file_id, set()).discard(user_id)
        return self

    def with_features(self, *, viewer: bool = False, direct_editing: bool = False) -> "FakeHostBuilder":
        self._features = HostFeatures(viewer=viewer, direct_editing=direct_editing)
        return self

    def with_key_store(self) -> "FakeHostBuilder":
        self._with_keys = True
        return self
