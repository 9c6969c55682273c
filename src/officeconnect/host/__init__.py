from .exceptions import CapabilityDenied
from .host_builder import Host, HostFeatures, make_host, resolve_features
from .services import ResolvedFile

__all__ = [
    "CapabilityDenied",
    "Host",
    "HostFeatures",
    "make_host",
    "resolve_features",
    "ResolvedFile",
]
