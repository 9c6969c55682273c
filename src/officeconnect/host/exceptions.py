class CapabilityDenied(Exception):
    """Raised when code reaches for an optional host capability the host did not advertise."""

    def __init__(self, capability: str):
        self.capability = capability
        super().__init__(f"Host capability '{capability}' not available on this host")
