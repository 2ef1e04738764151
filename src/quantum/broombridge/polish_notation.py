"""
Decoder for single ladder-operator tokens.

Broombridge writes each operator as ``(<orbital><spin>)<marker>``, with a
one-based orbital index, spin ``a`` (up) or ``b`` (down) and an optional run of
``+`` marking a creation operator, e.g. ``(1a)+``, ``(2b)``, ``(12a)+``.
"""

from typing import Any, Optional, Tuple

from .exceptions import MalformedOperatorTokenError
from .spin_orbital import IndexConvention, Spin, SpinOrbital

_DIGITS = "0123456789"
# Below CPython's int() string-conversion limit.
MAX_ORBITAL_DIGITS = 64
_SPINS = {"a": Spin.UP, "b": Spin.DOWN}
_SPIN_LETTERS = {Spin.UP: "a", Spin.DOWN: "b"}
CREATION_MARKER = "+"


def _scan_from(token: str, start: int) -> Optional[Tuple[int, Spin, int]]:
    """
    Scan ``(digits spin)`` at ``token[start]``.

    Returns (one-based orbital, spin, position after ``)``) or None.
    """
    pos = start + 1
    digits_end = pos
    while digits_end < len(token) and token[digits_end] in _DIGITS:
        digits_end += 1
    if digits_end == pos or digits_end - pos > MAX_ORBITAL_DIGITS:
        return None
    if digits_end + 1 >= len(token):
        return None
    spin = _SPINS.get(token[digits_end])
    if spin is None or token[digits_end + 1] != ")":
        return None
    return int(token[pos:digits_end]), spin, digits_end + 2


def decode_operator_token(
    token: Any, index_convention: IndexConvention = IndexConvention.UP_DOWN
) -> Tuple[int, SpinOrbital]:
    """
    Decode one operator token.

    The first ``(digits spin)`` group found anywhere in the token is used.
    A non-empty run of ``+`` directly after it marks a creation operator;
    anything else after it is ignored.

    Args:
        token: Operator token, e.g. ``"(1a)+"``
        index_convention: Convention attached to the resulting spin-orbital

    Returns:
        ``(creation_flag, spin_orbital)`` with a zero-based orbital index

    Raises:
        MalformedOperatorTokenError: If no valid operator group is present
    """
    text = str(token)
    start = text.find("(")
    while start != -1:
        scanned = _scan_from(text, start)
        if scanned is not None:
            orbital, spin, end = scanned
            if orbital < 1:
                raise MalformedOperatorTokenError(token)
            creation = 1 if text.startswith(CREATION_MARKER, end) else 0
            # Convert from Broombridge 1-indexing to 0-indexing.
            return creation, SpinOrbital(
                orbital=orbital - 1, spin=spin, convention=index_convention
            )
        start = text.find("(", start + 1)
    raise MalformedOperatorTokenError(token)


def encode_operator_token(orbital: int, spin: Spin, creation: bool) -> str:
    """Encode a zero-based orbital, spin and creation flag as a token."""
    if orbital < 0:
        raise ValueError(f"Orbital index must be non-negative: {orbital}")
    marker = CREATION_MARKER if creation else ""
    return f"({orbital + 1}{_SPIN_LETTERS[Spin(spin)]}){marker}"
