"""
Products of fermionic ladder operators.

A term is canonically ordered when all creation operators stand to the left of
all annihilation operators, creation operators are sorted in ascending
spin-orbital order and annihilation operators in descending order, e.g.
``a+_0 a+_3 a_2 a_1``.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, model_validator

from .spin_orbital import SpinOrbital

LadderOperator = Tuple[int, SpinOrbital]


def _operator_key(operator: LadderOperator) -> Tuple[int, int, int]:
    flag, spin_orbital = operator
    first, second = spin_orbital.sort_key
    if flag == 1:
        return (0, first, second)
    return (1, -first, -second)


def _first_disorder(operators: List[LadderOperator]) -> int:
    """Position of the first adjacent pair that is out of order, or -1."""
    for pos in range(len(operators) - 1):
        if _operator_key(operators[pos]) >= _operator_key(operators[pos + 1]):
            return pos
    return -1


class FermionTerm(BaseModel):
    """A product of creation/annihilation operators with a scalar coefficient."""

    creation_flags: Tuple[int, ...] = Field(
        default=(), description="1 for a creation operator, 0 for annihilation"
    )
    spin_orbitals: Tuple[SpinOrbital, ...] = Field(
        default=(), description="Spin-orbital acted on by each operator"
    )
    coefficient: float = Field(default=1.0, description="Scalar coefficient")

    class Config:
        """Pydantic configuration."""

        frozen = True

    @model_validator(mode="after")
    def validate_operators(self):
        """Validate that flags and spin-orbitals line up."""
        if len(self.creation_flags) != len(self.spin_orbitals):
            raise ValueError(
                f"Got {len(self.creation_flags)} creation flags for "
                f"{len(self.spin_orbitals)} spin-orbitals"
            )
        if any(flag not in (0, 1) for flag in self.creation_flags):
            raise ValueError(f"Creation flags must be 0 or 1: {self.creation_flags}")
        return self

    @classmethod
    def from_operators(
        cls, operators: List[LadderOperator], coefficient: float = 1.0
    ) -> FermionTerm:
        """Build a term from ``(creation_flag, spin_orbital)`` pairs."""
        return cls(
            creation_flags=tuple(flag for flag, _ in operators),
            spin_orbitals=tuple(spin_orbital for _, spin_orbital in operators),
            coefficient=coefficient,
        )

    @property
    def operators(self) -> List[LadderOperator]:
        """Ladder operators as ``(creation_flag, spin_orbital)`` pairs."""
        return list(zip(self.creation_flags, self.spin_orbitals))

    @property
    def has_annihilation(self) -> bool:
        """Whether any operator is an annihilation operator."""
        return 0 in self.creation_flags

    def with_coefficient(self, coefficient: float) -> FermionTerm:
        """Return a copy carrying a different coefficient."""
        return self.model_copy(update={"coefficient": coefficient})

    def is_in_canonical_order(self) -> bool:
        """Check whether the operator string is already canonically ordered."""
        return _first_disorder(self.operators) == -1

    def canonical_order(self) -> List[FermionTerm]:
        """
        Reorder into canonical order using the anticommutation relations.

        Swapping two distinct operators flips the sign of the coefficient;
        swapping ``a_p a+_p`` additionally produces the contracted term,
        since ``a_p a+_p = 1 - a+_p a_p``. Repeated operators vanish.

        Returns:
            Canonically ordered terms with like terms combined and zero
            coefficients dropped, sorted deterministically
        """
        pending: List[Tuple[List[LadderOperator], float]] = [
            (self.operators, self.coefficient)
        ]
        collected: Dict[Tuple[LadderOperator, ...], float] = {}

        while pending:
            operators, coefficient = pending.pop()
            pos = _first_disorder(operators)
            if pos == -1:
                key = tuple(operators)
                collected[key] = collected.get(key, 0.0) + coefficient
                continue

            left, right = operators[pos], operators[pos + 1]
            if _operator_key(left) == _operator_key(right):
                # a_p a_p = a+_p a+_p = 0
                continue

            swapped = operators[:pos] + [right, left] + operators[pos + 2 :]
            pending.append((swapped, -coefficient))
            if left[1].sort_key == right[1].sort_key:
                contracted = operators[:pos] + operators[pos + 2 :]
                pending.append((contracted, coefficient))

        terms = [
            FermionTerm.from_operators(list(key), coefficient)
            for key, coefficient in collected.items()
            if coefficient != 0.0
        ]
        terms.sort(
            key=lambda term: (
                len(term.creation_flags),
                [_operator_key(operator) for operator in term.operators],
            )
        )
        return terms

    def __str__(self) -> str:
        operators = " ".join(
            f"a{'+' if flag else ''}_{spin_orbital}"
            for flag, spin_orbital in self.operators
        )
        return f"{self.coefficient} {operators}".strip()
