"""Unit tests for fermionic terms and their canonical order."""

import pytest
from pydantic import ValidationError

from quantum.broombridge import FermionTerm, IndexConvention, Spin, SpinOrbital


def up(orbital, convention=IndexConvention.UP_DOWN):
    return SpinOrbital(orbital=orbital, spin=Spin.UP, convention=convention)


def down(orbital, convention=IndexConvention.UP_DOWN):
    return SpinOrbital(orbital=orbital, spin=Spin.DOWN, convention=convention)


class TestSpinOrbital:
    """Test spin-orbital flattening."""

    def test_up_down_convention(self):
        """Test interleaved spin indexing."""
        assert up(0).to_int() == 0
        assert down(0).to_int() == 1
        assert up(3).to_int() == 6
        assert down(3).to_int() == 7

    def test_half_up_convention(self):
        """Test blocked spin indexing."""
        convention = IndexConvention.HALF_UP

        assert up(3, convention).to_int(n_orbitals=4) == 3
        assert down(0, convention).to_int(n_orbitals=4) == 4
        assert down(3, convention).to_int(n_orbitals=4) == 7

    def test_half_up_requires_orbital_count(self):
        """Test that the blocked convention needs the orbital count."""
        with pytest.raises(ValueError):
            down(1, IndexConvention.HALF_UP).to_int()

    def test_negative_orbital(self):
        """Test that negative orbitals are rejected."""
        with pytest.raises(ValidationError):
            SpinOrbital(orbital=-1, spin=Spin.UP)


class TestFermionTerm:
    """Test fermionic term construction."""

    def test_from_operators(self):
        """Test construction from operator pairs."""
        term = FermionTerm.from_operators([(1, up(0)), (0, down(1))], 0.5)

        assert term.creation_flags == (1, 0)
        assert term.spin_orbitals == (up(0), down(1))
        assert term.coefficient == 0.5
        assert term.has_annihilation

    def test_mismatched_lengths(self):
        """Test that flags and spin-orbitals must line up."""
        with pytest.raises(ValidationError):
            FermionTerm(creation_flags=(1, 1), spin_orbitals=(up(0),))

    def test_invalid_flag(self):
        """Test that creation flags must be 0 or 1."""
        with pytest.raises(ValidationError):
            FermionTerm(creation_flags=(2,), spin_orbitals=(up(0),))

    def test_with_coefficient(self):
        """Test that coefficient replacement returns a new term."""
        term = FermionTerm.from_operators([(1, up(0))], 0.5)
        scaled = term.with_coefficient(1.0)

        assert scaled.coefficient == 1.0
        assert term.coefficient == 0.5


class TestCanonicalOrder:
    """Test anticommutation-based reordering."""

    def test_ordered_term_is_unchanged(self):
        """Test that a canonical term maps to itself."""
        term = FermionTerm.from_operators([(1, up(0)), (1, up(2)), (0, up(1))], 0.3)

        assert term.is_in_canonical_order()
        assert term.canonical_order() == [term]

    def test_creation_swap_flips_sign(self):
        """Test swapping two creation operators."""
        term = FermionTerm.from_operators([(1, up(1)), (1, up(0))], 1.0)

        assert term.canonical_order() == [
            FermionTerm.from_operators([(1, up(0)), (1, up(1))], -1.0)
        ]

    def test_annihilation_descending(self):
        """Test that annihilation operators are sorted in descending order."""
        term = FermionTerm.from_operators([(0, up(0)), (0, up(1))], 1.0)

        assert term.canonical_order() == [
            FermionTerm.from_operators([(0, up(1)), (0, up(0))], -1.0)
        ]

    def test_creation_moves_left_of_annihilation(self):
        """Test moving a creation operator past a distinct annihilation."""
        term = FermionTerm.from_operators([(0, up(0)), (1, up(1))], 2.0)

        assert term.canonical_order() == [
            FermionTerm.from_operators([(1, up(1)), (0, up(0))], -2.0)
        ]

    def test_contraction(self):
        """Test a_p a+_p = 1 - a+_p a_p."""
        term = FermionTerm.from_operators([(0, up(0)), (1, up(0))], 1.0)

        assert term.canonical_order() == [
            FermionTerm(coefficient=1.0),
            FermionTerm.from_operators([(1, up(0)), (0, up(0))], -1.0),
        ]

    def test_repeated_operator_vanishes(self):
        """Test that a+_p a+_p = 0."""
        term = FermionTerm.from_operators([(1, down(2)), (1, up(0)), (1, down(2))], 1.0)

        assert term.canonical_order() == []

    def test_zero_coefficient_vanishes(self):
        """Test that zero terms are dropped."""
        term = FermionTerm.from_operators([(1, up(0))], 0.0)

        assert term.canonical_order() == []

    def test_number_operator_product(self):
        """Test (a_0 a+_0)(a_1 a+_1) expands to four normal-ordered terms."""
        term = FermionTerm.from_operators(
            [(0, up(0)), (1, up(0)), (0, up(1)), (1, up(1))], 1.0
        )

        ordered = term.canonical_order()
        created = [t for t in ordered if not t.has_annihilation]

        assert len(ordered) == 4
        assert created == [FermionTerm(coefficient=1.0)]
        assert all(t.is_in_canonical_order() for t in ordered)

    def test_idempotence(self):
        """Test that canonical terms are fixed points of the reordering."""
        term = FermionTerm.from_operators(
            [(0, up(0)), (1, down(1)), (1, up(0)), (0, down(2))], 0.7
        )

        for ordered in term.canonical_order():
            assert ordered.canonical_order() == [ordered]

    def test_half_up_order(self):
        """Test that ordering follows the blocked convention."""
        convention = IndexConvention.HALF_UP
        term = FermionTerm.from_operators(
            [(1, down(0, convention)), (1, up(1, convention))], 1.0
        )

        assert term.canonical_order() == [
            FermionTerm.from_operators(
                [(1, up(1, convention)), (1, down(0, convention))], -1.0
            )
        ]
