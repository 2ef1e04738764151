"""
Orbital integrals and their permutational symmetries.

One-electron integrals ``h_ij`` over real orbitals are symmetric under
``i <-> j``. Two-electron integrals in Mulliken (chemist's) notation
``(ij|kl)`` have the 8-fold symmetry

    (ij|kl) = (ji|kl) = (ij|lk) = (ji|lk) = (kl|ij) = (lk|ij) = (kl|ji) = (lk|ji)

and map to Dirac (physicist's) notation as ``(ij|kl) = <ik|jl>``.
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator


class IntegralConvention(str, Enum):
    """Index layout of a two-electron integral."""

    MULLIKEN = "mulliken"
    DIRAC = "dirac"


def _swap_middle(indices: Tuple[int, ...]) -> Tuple[int, ...]:
    i, j, k, l = indices
    return (i, k, j, l)


def _mulliken_equivalents(indices: Tuple[int, ...]) -> List[Tuple[int, ...]]:
    i, j, k, l = indices
    return [
        (i, j, k, l),
        (j, i, k, l),
        (i, j, l, k),
        (j, i, l, k),
        (k, l, i, j),
        (l, k, i, j),
        (k, l, j, i),
        (l, k, j, i),
    ]


class OrbitalIntegral(BaseModel):
    """
    A one- or two-electron integral over zero-based orbital indices.

    Equality and hashing use the index tuple and convention only, so a set of
    canonical forms holds one entry per symmetry class.
    """

    orbital_indices: Tuple[int, ...] = Field(description="Zero-based orbital indices")
    coefficient: float = Field(default=0.0, description="Integral value in Hartree")
    convention: IntegralConvention = Field(
        default=IntegralConvention.MULLIKEN, description="Two-electron index layout"
    )

    class Config:
        """Pydantic configuration."""

        frozen = True

    @field_validator("orbital_indices")
    @classmethod
    def validate_orbital_indices(cls, v):
        """Validate index count and sign."""
        if len(v) not in (2, 4):
            raise ValueError(
                f"Orbital integrals take 2 or 4 indices, got {len(v)}: {v}"
            )
        if any(index < 0 for index in v):
            raise ValueError(f"Orbital indices must be non-negative: {v}")
        return v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrbitalIntegral):
            return NotImplemented
        return (self.orbital_indices, self.convention) == (
            other.orbital_indices,
            other.convention,
        )

    def __hash__(self) -> int:
        return hash((self.orbital_indices, self.convention))

    @property
    def n_indices(self) -> int:
        """Number of orbital indices (2 or 4)."""
        return len(self.orbital_indices)

    def to_convention(self, convention: IntegralConvention) -> "OrbitalIntegral":
        """Return the same integral with indices laid out in ``convention``."""
        if convention == self.convention or self.n_indices == 2:
            return self.model_copy(update={"convention": convention})
        return OrbitalIntegral(
            orbital_indices=_swap_middle(self.orbital_indices),
            coefficient=self.coefficient,
            convention=convention,
        )

    def equivalent_indices(self) -> List[Tuple[int, ...]]:
        """All index tuples, in this integral's convention, with the same value."""
        if self.n_indices == 2:
            i, j = self.orbital_indices
            return [(i, j), (j, i)]
        if self.convention == IntegralConvention.MULLIKEN:
            return _mulliken_equivalents(self.orbital_indices)
        return [
            _swap_middle(indices)
            for indices in _mulliken_equivalents(_swap_middle(self.orbital_indices))
        ]

    def canonical_form(self) -> "OrbitalIntegral":
        """Return the symmetry-equivalent integral with the smallest index tuple."""
        return OrbitalIntegral(
            orbital_indices=min(self.equivalent_indices()),
            coefficient=self.coefficient,
            convention=self.convention,
        )

    def is_canonical(self) -> bool:
        """Check whether the indices are already in canonical form."""
        return self.orbital_indices == min(self.equivalent_indices())
