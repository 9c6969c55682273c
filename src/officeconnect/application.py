"""Plugin entry points: registration with the host and boot.

The host calls ``register(context)`` once while loading plugins and
``boot(context)`` once the plugin is ready. Every service is built by an
explicit factory taking the assembled ``Host``; optional host features are
negotiated once in ``create_application`` and never re-checked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from .core.config import Settings, get_settings_instance
from .core.crypt import Crypt
from .core.logging import setup_logging
from .direct_editor import DirectEditor
from .hooks import Hooks
from .host.host_builder import FEATURE_DIRECT_EDITING, Host, HostFeatures, make_host, resolve_features
from .host.l10n import CatalogLocalization
from .host.services import AccessListService, FileLookupService, KeyValueStore, UserDirectoryService
from .host.urls import RouteLinkBuilder
from .keys import InMemoryKeyValueStore, KeyManager
from .listeners import (
    FILES_LOAD_ADDITIONAL_SCRIPTS,
    FILES_SHARING_BEFORE_TEMPLATE_RENDERED,
    LOAD_VIEWER,
    REGISTER_DIRECT_EDITOR,
    DirectEditorListener,
    FilesLoadListener,
    FilesSharingLoadListener,
    LoadViewerListener,
)
from .notifications.notifier import Notifier, editor_route

logger = logging.getLogger(__name__)

Factory = Callable[[Host], Any]


class RegistrationContext(Protocol):
    def register_event_listener(self, event: str, factory: Factory) -> None:
        ...

    def register_service(self, name: str, factory: Factory) -> None:
        ...


class BootContext(Protocol):
    host: Host

    def connect_hook(self, signal: str, handler: Callable[[dict[str, Any]], None]) -> None:
        ...


class Application:
    def __init__(self, settings: Settings | None = None, features: HostFeatures | None = None) -> None:
        self.settings = settings or get_settings_instance()
        self.app_name = self.settings.app_name
        self.features = features or resolve_features(None, self.settings)
        self.crypt = Crypt(self.settings)
        self.hooks: Hooks | None = None

    def routes(self) -> dict[str, str]:
        """Named routes the plugin serves, relative to the host base URL."""
        return {
            editor_route(self.app_name): f"/apps/{self.app_name}/{{fileId}}",
            f"{self.app_name}.settings.index": f"/settings/admin/{self.app_name}",
        }

    def build_host(
        self,
        *,
        files: FileLookupService,
        shares: AccessListService,
        users: UserDirectoryService,
        keys: KeyValueStore | None = None,
    ) -> Host:
        """Assemble the host container from host services and the plugin's own l10n and routes."""
        return make_host(
            app_name=self.app_name,
            files=files,
            shares=shares,
            users=users,
            l10n=CatalogLocalization(),
            urls=RouteLinkBuilder(self.settings.base_url, self.routes()),
            keys=keys,
            features=self.features,
        )

    def _notifier(self, host: Host) -> Notifier:
        return Notifier(
            self.app_name,
            host,
            distinguish_lookup_failures=self.settings.distinguish_lookup_failures,
        )

    def _direct_editor(self, host: Host) -> DirectEditor:
        host.require(FEATURE_DIRECT_EDITING)
        return DirectEditor(
            self.app_name,
            host.urls,
            host.l10n,
            host.log,
            self.settings,
            self.crypt,
        )

    def register(self, context: RegistrationContext) -> None:
        if self.features.viewer:
            context.register_event_listener(LOAD_VIEWER, lambda host: LoadViewerListener(self.app_name, self.settings))

        context.register_event_listener(
            FILES_LOAD_ADDITIONAL_SCRIPTS, lambda host: FilesLoadListener(self.app_name, self.settings)
        )
        context.register_event_listener(
            FILES_SHARING_BEFORE_TEMPLATE_RENDERED, lambda host: FilesSharingLoadListener(self.app_name, self.settings)
        )

        context.register_service("L10N", lambda host: host.l10n)
        context.register_service("RootStorage", lambda host: host.files)
        context.register_service("ShareManager", lambda host: host.shares)
        context.register_service("UserManager", lambda host: host.users)
        context.register_service("Logger", lambda host: host.log)
        context.register_service("URLGenerator", lambda host: host.urls)
        context.register_service("Notifier", self._notifier)

        if self.features.direct_editing:
            context.register_service("DirectEditor", self._direct_editor)
            context.register_event_listener(
                REGISTER_DIRECT_EDITOR, lambda host: DirectEditorListener(self._direct_editor(host))
            )

        logger.info(
            "Registered %s",
            self.app_name,
            extra={"viewer": self.features.viewer, "direct_editing": self.features.direct_editing},
        )

    def boot(self, context: BootContext) -> None:
        host = context.host
        if host.has("keys"):
            store = host.keys
        else:
            logger.warning("Host provides no key storage; document keys will not survive a restart")
            store = InMemoryKeyValueStore()
        self.hooks = Hooks.connect_hooks(context, KeyManager(store))


def create_application(
    settings: Settings | None = None,
    advertised_features: Iterable[str] | None = None,
) -> Application:
    """Configure logging, negotiate host features and build the application."""
    settings = settings or get_settings_instance()
    setup_logging(settings)
    return Application(settings, resolve_features(advertised_features, settings))
