"""Exceptions raised while decoding Broombridge problem descriptions."""

from typing import Any, Optional


class BroombridgeError(ValueError):
    """Base exception for Broombridge decoding errors."""
    pass


class InvalidVersionError(BroombridgeError):
    """Raised when a document declares an unsupported format version."""

    def __init__(self, version: Any):
        self.version = version
        super().__init__(f"Unsupported Broombridge version: {version!r}")


class MalformedOperatorTokenError(BroombridgeError):
    """Raised when an operator token is not valid Polish notation."""

    def __init__(self, token: Any):
        self.token = token
        super().__init__(f"{token!r} is not valid Polish notation")


class NumberFormatError(BroombridgeError):
    """Raised when an amplitude token is not an invariant decimal number."""

    def __init__(self, token: Any):
        self.token = token
        super().__init__(f"{token!r} is not a valid decimal amplitude")


class DuplicateLabelError(BroombridgeError):
    """Raised when two initial states share a label."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Duplicate initial state label: {label!r}")


class UnsupportedStateMethodError(BroombridgeError):
    """Raised when a superposition is demanded from a state that has none."""

    def __init__(self, label: str, method: Optional[str] = None):
        self.label = label
        self.method = method
        detail = f" (method {method!r})" if method is not None else ""
        super().__init__(
            f"initial state `{label}`{detail} is not recognized or implemented"
        )


class OrbitalIndexError(BroombridgeError):
    """Raised when an orbital index falls outside the declared orbital count."""

    def __init__(self, orbital: int, n_orbitals: int, context: str = ""):
        self.orbital = orbital
        self.n_orbitals = n_orbitals
        where = f" in {context}" if context else ""
        super().__init__(
            f"Orbital index {orbital}{where} is out of range for "
            f"{n_orbitals} orbitals"
        )
