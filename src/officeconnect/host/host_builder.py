from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..core.config import Settings
from .exceptions import CapabilityDenied
from .log_capability import LogCapability
from .services import (
    AccessListService,
    FileLookupService,
    KeyValueStore,
    LinkBuilderService,
    LocalizationService,
    UserDirectoryService,
)

FEATURE_VIEWER = "viewer"
FEATURE_DIRECT_EDITING = "direct_editing"


@dataclass(frozen=True)
class HostFeatures:
    """Optional host features, negotiated once at startup."""

    viewer: bool = False
    direct_editing: bool = False

    def enabled(self, feature: str) -> bool:
        return bool(getattr(self, feature, False))


def resolve_features(advertised: Iterable[str] | None, settings: Settings | None = None) -> HostFeatures:
    """Combine what the host advertises with explicit settings overrides.

    An override of ``None`` defers to the host; ``True``/``False`` wins.
    """
    offered = {str(f).strip().lower() for f in (advertised or [])}
    viewer = FEATURE_VIEWER in offered
    direct_editing = FEATURE_DIRECT_EDITING in offered
    if settings is not None:
        if settings.feature_viewer is not None:
            viewer = settings.feature_viewer
        if settings.feature_direct_editing is not None:
            direct_editing = settings.feature_direct_editing
    return HostFeatures(viewer=viewer, direct_editing=direct_editing)


class Host:
    """Explicit container of the services the plugin consumes.

    Immutable after construction. Optional capabilities the host did not
    supply raise ``CapabilityDenied`` on access instead of returning None.
    """

    __slots__ = (
        "_frozen",
        "app_name",
        "features",
        "files",
        "keys",
        "l10n",
        "log",
        "shares",
        "urls",
        "users",
    )

    # Capability names that may be absent on a given host
    _OPTIONAL_CAPS = frozenset(("keys",))

    def __init__(self, app_name: str, features: HostFeatures | None = None) -> None:
        object.__setattr__(self, "_frozen", False)
        object.__setattr__(self, "app_name", app_name)
        object.__setattr__(self, "features", features or HostFeatures())
        for cap in ("files", "shares", "users", "l10n", "urls", "log", "keys"):
            object.__setattr__(self, cap, None)

    def _freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError("Host attributes are immutable after construction")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Host attributes cannot be deleted")

    def __getattribute__(self, name: str) -> Any:
        value = object.__getattribute__(self, name)
        if value is None and name in Host._OPTIONAL_CAPS:
            raise CapabilityDenied(name)
        return value

    def has(self, capability: str) -> bool:
        """Whether an optional capability was supplied."""
        return object.__getattribute__(self, capability) is not None

    def require(self, feature: str) -> None:
        """Raise ``CapabilityDenied`` unless *feature* was negotiated."""
        if not self.features.enabled(feature):
            raise CapabilityDenied(feature)


def make_host(
    *,
    app_name: str,
    files: FileLookupService,
    shares: AccessListService,
    users: UserDirectoryService,
    l10n: LocalizationService,
    urls: LinkBuilderService,
    keys: KeyValueStore | None = None,
    features: HostFeatures | None = None,
    log: LogCapability | None = None,
) -> Host:
    """Assemble the host container once, at process or request start."""
    h = Host(app_name=app_name, features=features)
    h.files = files
    h.shares = shares
    h.users = users
    h.l10n = l10n
    h.urls = urls
    h.keys = keys
    h.log = log or LogCapability(app_name=app_name)

    # Freeze the host so services cannot be swapped after assembly
    h._freeze()
    return h
