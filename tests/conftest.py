"""
Shared test fixtures for quantum-broombridge tests.
"""

import pytest

from quantum.broombridge import ProblemDescription, parse_broombridge

H2_BROOMBRIDGE = """
format:
  version: '0.2'
generator:
  source: test
  version: '1.0'
problem_description:
  - metadata:
      molecule_name: H2
    basis_set:
      type: gaussian
      name: sto-3g
    coulomb_repulsion:
      units: hartree
      value: 0.713753990544
    scf_energy:
      units: hartree
      value: -1.116685
    energy_offset:
      units: hartree
      value: 0.0
    n_orbitals: 2
    n_electrons: 2
    hamiltonian:
      one_electron_integrals:
        units: hartree
        format: sparse
        values:
          - [1, 1, -1.252477]
          - [2, 2, -0.475934]
          - [1, 2, -0.01]
          - [2, 1, -0.01]
      two_electron_integrals:
        units: hartree
        format: sparse
        index_convention: mulliken
        values:
          - [1, 1, 1, 1, 0.674493]
          - [2, 2, 1, 1, 0.663472]
          - [1, 1, 2, 2, 0.663472]
          - [2, 1, 2, 1, 0.181287]
          - [2, 2, 2, 2, 0.697398]
    initial_state_suggestions:
      - state:
          label: '|G>'
          energy:
            units: hartree
            value: -1.137
          method: sparse_multi_configurational
          superposition:
            - [1.0, '(1a)+', '(1b)+', '|vacuum>']
      - state:
          label: UCCSD
          method: unitary_coupled_cluster
          cluster_operator:
            reference_state: [1.0, '(1a)+', '(1b)+', '|vacuum>']
            one_body_amplitudes:
              - [0.1, '(2a)+', '(1a)']
            two_body_amplitudes:
              - [0.2, '(2a)+', '(2b)+', '(1b)', '(1a)']
      - state:
          label: HF
          method: single_configurational
"""


@pytest.fixture
def h2_yaml():
    """Broombridge YAML text for H2 in a minimal basis."""
    return H2_BROOMBRIDGE


@pytest.fixture
def h2_document(h2_yaml):
    """Parsed H2 Broombridge document."""
    return parse_broombridge(h2_yaml)


@pytest.fixture
def h2_problem(h2_document):
    """Raw H2 problem description."""
    return h2_document.problem_description[0]


@pytest.fixture
def make_problem():
    """Factory for small raw problem descriptions."""

    def _make(
        one_electron=(),
        two_electron=(),
        states=(),
        n_orbitals=4,
        n_electrons=2,
        coulomb_repulsion=0.5,
        energy_offset=0.25,
    ):
        return ProblemDescription.model_validate(
            {
                "n_orbitals": n_orbitals,
                "n_electrons": n_electrons,
                "coulomb_repulsion": {"units": "hartree", "value": coulomb_repulsion},
                "energy_offset": {"units": "hartree", "value": energy_offset},
                "hamiltonian": {
                    "one_electron_integrals": {"values": [list(row) for row in one_electron]},
                    "two_electron_integrals": {"values": [list(row) for row in two_electron]},
                },
                "initial_state_suggestions": [{"state": state} for state in states],
            }
        )

    return _make
