"""Export typed problems as dense integral arrays and FCIDUMP files."""

from typing import Tuple

import numpy as np
from pyscf.tools.fcidump import from_integrals

from .orbital_integral import IntegralConvention
from .problem import TypedProblem


def to_dense_integrals(problem: TypedProblem) -> Tuple[np.ndarray, np.ndarray]:
    """
    Expand the stored integrals into dense arrays.

    Every stored term is written to all of its symmetry-equivalent positions.

    Args:
        problem: Typed problem

    Returns:
        ``(h1, h2)`` with shapes ``(n, n)`` and ``(n, n, n, n)``, the latter in
        Mulliken (chemist's) index order
    """
    n = problem.n_orbitals
    h1 = np.zeros((n, n))
    h2 = np.zeros((n, n, n, n))

    for integral in problem.one_body_terms:
        for indices in integral.equivalent_indices():
            h1[indices] = integral.coefficient

    for integral in problem.two_body_terms:
        mulliken = integral.to_convention(IntegralConvention.MULLIKEN)
        for indices in mulliken.equivalent_indices():
            h2[indices] = mulliken.coefficient

    return h1, h2


def write_fcidump(
    problem: TypedProblem, filename: str, ms: int = 0, tol: float = 1e-15
) -> str:
    """
    Write a typed problem to an FCIDUMP file.

    Args:
        problem: Typed problem
        filename: Output FCIDUMP filename
        ms: Spin polarization 2S written to the header
        tol: Integrals below this magnitude are omitted

    Returns:
        Path to created FCIDUMP file
    """
    h1, h2 = to_dense_integrals(problem)
    from_integrals(
        filename,
        h1,
        h2,
        problem.n_orbitals,
        problem.n_electrons,
        nuc=problem.identity_term,
        ms=ms,
        tol=tol,
    )
    return filename
