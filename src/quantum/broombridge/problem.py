"""Extraction of typed electronic-structure problems from Broombridge."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .config import ExtractionConfig
from .exceptions import DuplicateLabelError, OrbitalIndexError
from .initial_state import InputState, StateType, parse_initial_state
from .orbital_integral import IntegralConvention, OrbitalIntegral
from .schema import IntegralEntry, ProblemDescription
from .spin_orbital import IndexConvention

logger = logging.getLogger(__name__)


class TypedProblem(BaseModel):
    """
    A Broombridge problem with type information parsed and only the data
    needed for Hamiltonian construction kept.

    One-body terms are stored in canonical form, one per symmetry class.
    Two-body terms are stored as given by the document (zero-based, Mulliken
    layout) without canonicalization, so symmetry-equivalent rows remain
    distinct entries.
    """

    n_orbitals: int = Field(description="Number of spatial orbitals")
    n_electrons: int = Field(description="Number of electrons")
    identity_term: float = Field(
        description="Coulomb repulsion plus energy offset in Hartree"
    )
    one_body_terms: FrozenSet[OrbitalIntegral] = Field(
        description="Canonical one-electron integrals"
    )
    two_body_terms: FrozenSet[OrbitalIntegral] = Field(
        description="Two-electron integrals as listed in the document"
    )
    initial_states: Mapping[str, InputState] = Field(
        default_factory=dict,
        validate_default=True,
        description="Initial states keyed by label",
    )
    index_convention: IndexConvention = Field(
        default=IndexConvention.UP_DOWN,
        description="Convention used to flatten spin-orbital indices",
    )

    class Config:
        """Pydantic configuration."""

        frozen = True

    @field_validator("initial_states")
    @classmethod
    def freeze_initial_states(cls, v):
        """Store the label map read-only."""
        return MappingProxyType(dict(v))

    @classmethod
    def from_problem_description(
        cls,
        problem: ProblemDescription,
        index_convention: Optional[IndexConvention] = None,
        config: Optional[ExtractionConfig] = None,
    ) -> TypedProblem:
        """Create a typed problem from a raw problem description."""
        return extract_problem(problem, index_convention, config)

    def get_problem_info(self) -> Dict[str, object]:
        """Summary of the problem size."""
        return {
            "n_orbitals": self.n_orbitals,
            "n_electrons": self.n_electrons,
            "identity_term": self.identity_term,
            "n_one_body_terms": len(self.one_body_terms),
            "n_two_body_terms": len(self.two_body_terms),
            "initial_states": sorted(self.initial_states),
            "index_convention": self.index_convention.value,
        }


def _to_integral(entry: IntegralEntry) -> OrbitalIntegral:
    indices, value = entry
    # This will convert from Broombridge 1-indexing to 0-indexing.
    return OrbitalIntegral(
        orbital_indices=tuple(index - 1 for index in indices),
        coefficient=value,
        convention=IntegralConvention.MULLIKEN,
    )


def _fold_integrals(
    integrals: Iterable[OrbitalIntegral], kind: str
) -> FrozenSet[OrbitalIntegral]:
    """Collect integrals into a set keyed by index tuple, first entry wins."""
    folded: Dict[OrbitalIntegral, OrbitalIntegral] = {}
    for integral in integrals:
        kept = folded.setdefault(integral, integral)
        if kept.coefficient != integral.coefficient:
            logger.warning(
                f"Conflicting {kind} integral {integral.orbital_indices}: keeping "
                f"{kept.coefficient}, ignoring {integral.coefficient}"
            )
    return frozenset(folded.values())


def _check_integral_range(
    integrals: Iterable[OrbitalIntegral], n_orbitals: int, kind: str
) -> None:
    for integral in integrals:
        for index in integral.orbital_indices:
            if index >= n_orbitals:
                raise OrbitalIndexError(
                    index, n_orbitals, f"{kind} integral {integral.orbital_indices}"
                )


def _check_state_range(state: InputState, n_orbitals: int) -> None:
    if state.state_type in (
        StateType.SINGLE_CONFIGURATIONAL,
        StateType.UNRECOGNIZED,
    ):
        return
    if state.state_type not in (
        StateType.SPARSE_MULTI_CONFIGURATIONAL,
        StateType.UNITARY_COUPLED_CLUSTER,
    ):
        raise ValueError(f"Unknown state type: {state.state_type}")
    for _, term in state.require_superposition():
        for spin_orbital in term.spin_orbitals:
            if spin_orbital.orbital >= n_orbitals:
                raise OrbitalIndexError(
                    spin_orbital.orbital, n_orbitals, f"initial state `{state.label}`"
                )


def extract_problem(
    problem: ProblemDescription,
    index_convention: Optional[IndexConvention] = None,
    config: Optional[ExtractionConfig] = None,
) -> TypedProblem:
    """
    Extract only the required information from a Broombridge problem.

    Args:
        problem: Raw problem description
        index_convention: Convention used to flatten spin-orbital indices;
            overrides the one in ``config``
        config: Extraction options

    Returns:
        The typed problem

    Raises:
        DuplicateLabelError: If two initial states share a label
        OrbitalIndexError: If an orbital index exceeds ``n_orbitals``
    """
    config = config or ExtractionConfig()
    if index_convention is not None:
        config = config.model_copy(update={"index_convention": index_convention})
    convention = config.index_convention

    one_body_terms = _fold_integrals(
        (
            _to_integral(entry).canonical_form()
            for entry in problem.hamiltonian.one_electron_integrals.entries()
        ),
        "one-electron",
    )
    two_body_terms = _fold_integrals(
        (
            _to_integral(entry)
            for entry in problem.hamiltonian.two_electron_integrals.entries()
        ),
        "two-electron",
    )

    initial_states: Dict[str, InputState] = {}
    for raw_state in problem.initial_states:
        if raw_state.label in initial_states:
            if config.reject_duplicate_labels:
                raise DuplicateLabelError(raw_state.label)
            logger.warning(f"Replacing initial state `{raw_state.label}`")
        initial_states[raw_state.label] = parse_initial_state(
            raw_state, convention, strict=config.strict_state_methods
        )

    if config.check_orbital_range:
        _check_integral_range(one_body_terms, problem.n_orbitals, "one-electron")
        _check_integral_range(two_body_terms, problem.n_orbitals, "two-electron")
        for state in initial_states.values():
            _check_state_range(state, problem.n_orbitals)

    logger.debug(
        f"Extracted problem with {problem.n_orbitals} orbitals, "
        f"{len(one_body_terms)} one-body terms, {len(two_body_terms)} two-body "
        f"terms and {len(initial_states)} initial states"
    )

    return TypedProblem(
        n_orbitals=problem.n_orbitals,
        n_electrons=problem.n_electrons,
        identity_term=problem.coulomb_repulsion.value + problem.energy_offset.value,
        one_body_terms=one_body_terms,
        two_body_terms=two_body_terms,
        initial_states=initial_states,
        index_convention=convention,
    )
