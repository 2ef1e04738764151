"""
Broombridge extraction example.

This example demonstrates how to:
1. Read a Broombridge document
2. Extract a typed problem
3. Inspect initial states and export an FCIDUMP file
"""

import tempfile
from pathlib import Path

from quantum.broombridge import IndexConvention, StateType, load_problems
from quantum.broombridge.fcidump import write_fcidump

DATA = Path(__file__).parent / "data" / "h2_sto3g.yaml"


def main():
    """Extract the H2 problem and summarize it."""
    print("Broombridge Extraction Example")
    print("=" * 50)

    (problem,) = load_problems(DATA, IndexConvention.UP_DOWN)

    for key, value in problem.get_problem_info().items():
        print(f"{key}: {value}")
    print()

    for label, state in problem.initial_states.items():
        print(f"State {label} ({state.state_type.value})")
        if state.state_type == StateType.SPARSE_MULTI_CONFIGURATIONAL:
            for (real, imag), term in state.require_superposition():
                print(f"  {real:+.4f}{imag:+.4f}j  {term}")
        elif state.state_type == StateType.UNITARY_COUPLED_CLUSTER:
            for (real, imag), term in state.require_superposition()[:-1]:
                print(f"  {real:+.4f}{imag:+.4f}j  {term}")
            (real, imag), term = state.reference
            print(f"  reference {real:+.4f}{imag:+.4f}j  {term}")
        elif state.state_type == StateType.SINGLE_CONFIGURATIONAL:
            print("  single configuration, no superposition")
        elif state.state_type == StateType.UNRECOGNIZED:
            print(f"  unrecognized method {state.method!r}")
    print()

    with tempfile.TemporaryDirectory() as tmp:
        filename = write_fcidump(problem, str(Path(tmp) / "h2.fcidump"))
        print(Path(filename).read_text())


if __name__ == "__main__":
    main()
