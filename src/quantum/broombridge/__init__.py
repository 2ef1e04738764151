"""Decoding of Broombridge electronic-structure problem descriptions."""

from .config import ExtractionConfig
from .exceptions import (
    BroombridgeError,
    DuplicateLabelError,
    InvalidVersionError,
    MalformedOperatorTokenError,
    NumberFormatError,
    OrbitalIndexError,
    UnsupportedStateMethodError,
)
from .fermion_term import FermionTerm
from .initial_state import (
    InputState,
    StateType,
    parse_initial_state,
    parse_state_method,
)
from .loader import load_problems, parse_broombridge, read_broombridge
from .orbital_integral import IntegralConvention, OrbitalIntegral
from .polish_notation import decode_operator_token, encode_operator_token
from .problem import TypedProblem, extract_problem
from .schema import BroombridgeDocument, ProblemDescription, State
from .spin_orbital import IndexConvention, Spin, SpinOrbital
from .terms import parse_amplitude, parse_cluster_amplitude, parse_configuration
from .version import LATEST_VERSION, SchemaVersion, resolve_version

__version__ = "0.1.0"

__all__ = [
    # Versions
    "SchemaVersion",
    "LATEST_VERSION",
    "resolve_version",
    # Value types
    "Spin",
    "IndexConvention",
    "SpinOrbital",
    "IntegralConvention",
    "OrbitalIntegral",
    "FermionTerm",
    # Parsing
    "decode_operator_token",
    "encode_operator_token",
    "parse_amplitude",
    "parse_configuration",
    "parse_cluster_amplitude",
    "StateType",
    "InputState",
    "parse_state_method",
    "parse_initial_state",
    # Problems
    "ExtractionConfig",
    "TypedProblem",
    "extract_problem",
    "BroombridgeDocument",
    "ProblemDescription",
    "State",
    "parse_broombridge",
    "read_broombridge",
    "load_problems",
    # Errors
    "BroombridgeError",
    "InvalidVersionError",
    "MalformedOperatorTokenError",
    "NumberFormatError",
    "DuplicateLabelError",
    "UnsupportedStateMethodError",
    "OrbitalIndexError",
]
