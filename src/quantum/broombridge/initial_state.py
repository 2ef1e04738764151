"""
Initial state parsing.

States are classified by their ``method`` into a closed set of state types.
Only sparse multi-configurational and unitary coupled-cluster states carry a
superposition; single-configurational and unrecognized states are kept with
no superposition, and asking one of those for its superposition raises
``UnsupportedStateMethodError``.
"""

import logging
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from .exceptions import UnsupportedStateMethodError
from .fermion_term import FermionTerm
from .schema import State
from .spin_orbital import IndexConvention
from .terms import Amplitude, parse_cluster_amplitude, parse_configuration

logger = logging.getLogger(__name__)

SuperpositionTerm = Tuple[Amplitude, FermionTerm]


class StateType(str, Enum):
    """Initial state preparation methods."""

    SINGLE_CONFIGURATIONAL = "single_configurational"
    SPARSE_MULTI_CONFIGURATIONAL = "sparse_multi_configurational"
    UNITARY_COUPLED_CLUSTER = "unitary_coupled_cluster"
    UNRECOGNIZED = "unrecognized"


_METHOD_LABELS = {
    "single_configurational": StateType.SINGLE_CONFIGURATIONAL,
    "sparse_multi_configurational": StateType.SPARSE_MULTI_CONFIGURATIONAL,
    "unitary_coupled_cluster": StateType.UNITARY_COUPLED_CLUSTER,
}


class InputState(BaseModel):
    """A parsed initial state."""

    label: str = Field(description="Unique state label")
    state_type: StateType = Field(description="State preparation method")
    method: Optional[str] = Field(
        default=None, description="Method label as written in the document"
    )
    superposition: Optional[Tuple[SuperpositionTerm, ...]] = Field(
        default=None,
        description="(amplitude, term) pairs; for UCC states the reference is last",
    )

    class Config:
        """Pydantic configuration."""

        frozen = True

    def require_superposition(self) -> Tuple[SuperpositionTerm, ...]:
        """
        Return the superposition of a multi-term state.

        Raises:
            UnsupportedStateMethodError: For single-configurational and
                unrecognized states
        """
        if self.state_type in (
            StateType.SPARSE_MULTI_CONFIGURATIONAL,
            StateType.UNITARY_COUPLED_CLUSTER,
        ):
            return self.superposition or ()
        if self.state_type in (
            StateType.SINGLE_CONFIGURATIONAL,
            StateType.UNRECOGNIZED,
        ):
            raise UnsupportedStateMethodError(self.label, self.method)
        raise ValueError(f"Unknown state type: {self.state_type}")

    @property
    def reference(self) -> SuperpositionTerm:
        """Reference configuration of a unitary coupled-cluster state."""
        if self.state_type == StateType.UNITARY_COUPLED_CLUSTER:
            return self.require_superposition()[-1]
        if self.state_type in (
            StateType.SINGLE_CONFIGURATIONAL,
            StateType.SPARSE_MULTI_CONFIGURATIONAL,
            StateType.UNRECOGNIZED,
        ):
            raise UnsupportedStateMethodError(self.label, self.method)
        raise ValueError(f"Unknown state type: {self.state_type}")


def parse_state_method(method: str) -> StateType:
    """Classify a method label, ignoring case. Unknown labels are not an error."""
    return _METHOD_LABELS.get(method.lower(), StateType.UNRECOGNIZED)


def parse_initial_state(
    state: State,
    index_convention: IndexConvention = IndexConvention.UP_DOWN,
    strict: bool = False,
) -> InputState:
    """
    Parse a raw initial state.

    Args:
        state: Raw state from the document
        index_convention: Convention for spin-orbitals in the superposition
        strict: Raise on unrecognized methods instead of keeping the state

    Returns:
        The parsed state

    Raises:
        UnsupportedStateMethodError: If ``strict`` and the method is unknown
    """
    state_type = parse_state_method(state.method)
    superposition = None

    if state_type == StateType.SPARSE_MULTI_CONFIGURATIONAL:
        if state.superposition is None:
            raise ValueError(f"initial state `{state.label}` has no superposition")
        superposition = tuple(
            parse_configuration(configuration, index_convention)
            for configuration in state.superposition
        )
    elif state_type == StateType.UNITARY_COUPLED_CLUSTER:
        cluster = state.cluster_operator
        if cluster is None:
            raise ValueError(f"initial state `{state.label}` has no cluster_operator")
        reference = parse_configuration(cluster.reference_state, index_convention)
        one_body = [
            parse_cluster_amplitude(amplitude, index_convention)
            for amplitude in cluster.one_body_amplitudes
        ]
        two_body = [
            parse_cluster_amplitude(amplitude, index_convention)
            for amplitude in cluster.two_body_amplitudes
        ]
        # The last term is the reference state.
        superposition = tuple(one_body + two_body + [reference])
    elif state_type == StateType.SINGLE_CONFIGURATIONAL:
        pass
    elif state_type == StateType.UNRECOGNIZED:
        if strict:
            raise UnsupportedStateMethodError(state.label, state.method)
        logger.warning(
            f"initial state `{state.label}` has unrecognized method "
            f"{state.method!r}; keeping it without a superposition"
        )
    else:
        raise ValueError(f"Unknown state type: {state_type}")

    return InputState(
        label=state.label,
        state_type=state_type,
        method=state.method,
        superposition=superposition,
    )
