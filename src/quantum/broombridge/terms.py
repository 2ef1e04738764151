"""Parsing of amplitude-prefixed operator token lists."""

import logging
import re
from typing import Any, Sequence, Tuple

from .exceptions import NumberFormatError
from .fermion_term import FermionTerm
from .polish_notation import decode_operator_token
from .spin_orbital import IndexConvention

logger = logging.getLogger(__name__)

# Invariant decimal format, independent of the host locale
_DECIMAL = re.compile(r"^\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*$")

Amplitude = Tuple[float, float]


def parse_amplitude(token: Any) -> float:
    """
    Parse a real amplitude in invariant decimal notation.

    Raises:
        NumberFormatError: If the token is not a plain decimal number
    """
    if isinstance(token, bool) or token is None:
        raise NumberFormatError(token)
    text = str(token)
    if not _DECIMAL.match(text):
        raise NumberFormatError(token)
    return float(text)


def _build_term(
    amplitude: float, tokens: Sequence[Any], index_convention: IndexConvention
) -> FermionTerm:
    operators = [decode_operator_token(token, index_convention) for token in tokens]
    return FermionTerm.from_operators(operators, amplitude)


def parse_configuration(
    tokens: Sequence[Any],
    index_convention: IndexConvention = IndexConvention.UP_DOWN,
) -> Tuple[Amplitude, FermionTerm]:
    """
    Parse one configuration of a superposition, e.g.
    ``[0.5, "(1a)+", "(2a)+", "|vacuum>"]``.

    The first token is the amplitude and the last token is the reference
    marker, which is not interpreted. The operators are brought into
    canonical order; if exactly one term without annihilation operators
    survives, its (possibly sign-flipped) coefficient becomes the amplitude.
    Otherwise the amplitude is 0.0. The returned term always has
    coefficient 1.0.

    Returns:
        ``((amplitude, 0.0), term)``
    """
    if len(tokens) == 0:
        raise NumberFormatError("")
    amplitude = parse_amplitude(tokens[0])
    term = _build_term(amplitude, tokens[1:-1], index_convention)

    created_states = [
        ordered for ordered in term.canonical_order() if not ordered.has_annihilation
    ]
    final_amplitude = 0.0
    if len(created_states) == 1:
        term = created_states[0]
        final_amplitude = term.coefficient
    else:
        logger.warning(
            f"Configuration {list(tokens)} reduced to {len(created_states)} "
            f"created states; amplitude set to 0.0"
        )
    return (final_amplitude, 0.0), term.with_coefficient(1.0)


def parse_cluster_amplitude(
    tokens: Sequence[Any],
    index_convention: IndexConvention = IndexConvention.UP_DOWN,
) -> Tuple[Amplitude, FermionTerm]:
    """
    Parse one cluster-operator amplitude, e.g. ``[0.1, "(3a)+", "(1a)"]``.

    No reference marker is expected and no reordering is applied.
    """
    if len(tokens) == 0:
        raise NumberFormatError("")
    term = _build_term(parse_amplitude(tokens[0]), tokens[1:], index_convention)
    return (term.coefficient, 0.0), term
