"""
Pydantic models for the fields of a Broombridge document that are consumed
during problem extraction. Unknown fields are ignored.
"""

import copy
from typing import Any, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, Field, model_validator

from .version import SchemaVersion, resolve_version

IntegralEntry = Tuple[Tuple[int, ...], float]

LEGACY_STATE_METHOD = "sparse_multi_configurational"


class _RawModel(BaseModel):
    class Config:
        """Pydantic configuration."""

        extra = "ignore"
        frozen = True


class Quantity(_RawModel):
    """A scalar value with units."""

    units: str = Field(default="hartree", description="Units of the value")
    value: float = Field(description="Scalar value")


class IntegralSet(_RawModel):
    """Sparse table of integrals, one ``[i, j, ..., value]`` row per entry."""

    units: str = Field(default="hartree", description="Units of the values")
    format: str = Field(default="sparse", description="Storage format")
    index_convention: Optional[str] = Field(
        default=None, description="Index convention declared by the document"
    )
    values: List[List[float]] = Field(
        default_factory=list, description="Rows of one-based indices and a value"
    )

    def entries(self) -> List[IntegralEntry]:
        """
        Split each row into its one-based index tuple and value.

        Raises:
            ValueError: If a row has no indices or a non-integral index
        """
        entries = []
        for row in self.values:
            if len(row) < 2:
                raise ValueError(f"Integral row {row} has no orbital indices")
            *indices, value = row
            if any(not float(index).is_integer() for index in indices):
                raise ValueError(f"Integral row {row} has non-integer indices")
            entries.append((tuple(int(index) for index in indices), float(value)))
        return entries


class Hamiltonian(_RawModel):
    """One- and two-electron integral tables."""

    one_electron_integrals: IntegralSet = Field(default_factory=IntegralSet)
    two_electron_integrals: IntegralSet = Field(default_factory=IntegralSet)


class ClusterOperator(_RawModel):
    """Reference state and cluster amplitudes of a UCC state."""

    reference_state: List[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("reference_state", "reference"),
        description="Reference configuration tokens",
    )
    one_body_amplitudes: List[List[Any]] = Field(default_factory=list)
    two_body_amplitudes: List[List[Any]] = Field(default_factory=list)


class State(_RawModel):
    """A suggested initial state."""

    label: str = Field(description="Unique state label")
    method: str = Field(description="State preparation method")
    energy: Optional[Quantity] = Field(default=None, description="Suggested energy")
    superposition: Optional[List[List[Any]]] = Field(
        default=None, description="Configurations of a multi-configurational state"
    )
    cluster_operator: Optional[ClusterOperator] = Field(
        default=None, description="Cluster operator of a UCC state"
    )


class InitialStateSuggestion(_RawModel):
    """Wrapper around a state, as laid out in the document."""

    state: State


class ProblemDescription(_RawModel):
    """One electronic-structure problem."""

    n_orbitals: int = Field(ge=0, description="Number of spatial orbitals")
    n_electrons: int = Field(ge=0, description="Number of electrons")
    coulomb_repulsion: Quantity = Field(
        default_factory=lambda: Quantity(value=0.0),
        description="Nuclear repulsion energy",
    )
    energy_offset: Quantity = Field(
        default_factory=lambda: Quantity(value=0.0),
        description="Constant energy offset",
    )
    hamiltonian: Hamiltonian = Field(default_factory=Hamiltonian)
    initial_state_suggestions: List[InitialStateSuggestion] = Field(
        default_factory=list
    )

    @property
    def initial_states(self) -> List[State]:
        """Suggested initial states in document order."""
        return [suggestion.state for suggestion in self.initial_state_suggestions]


class Format(_RawModel):
    """Document format header."""

    version: str = Field(description="Broombridge version string")


class BroombridgeDocument(_RawModel):
    """A Broombridge document."""

    format: Format
    problem_description: List[ProblemDescription] = Field(
        default_factory=list,
        validation_alias=AliasChoices("problem_description", "integral_sets"),
    )

    @model_validator(mode="before")
    @classmethod
    def default_legacy_state_methods(cls, data):
        """
        Version 0.1 states have no ``method``; every one of them is a sparse
        multi-configurational superposition.
        """
        if not isinstance(data, dict):
            return data
        header = data.get("format")
        if not isinstance(header, dict) or header.get("version") != "0.1":
            return data
        data = copy.deepcopy(data)
        problems = data.get("problem_description", data.get("integral_sets"))
        if not isinstance(problems, list):
            return data
        for problem in problems:
            if not isinstance(problem, dict):
                continue
            for suggestion in problem.get("initial_state_suggestions") or []:
                state = suggestion.get("state") if isinstance(suggestion, dict) else None
                if isinstance(state, dict):
                    state.setdefault("method", LEGACY_STATE_METHOD)
        return data

    @property
    def schema_version(self) -> SchemaVersion:
        """Resolved schema version of the document."""
        return resolve_version(self.format.version)
