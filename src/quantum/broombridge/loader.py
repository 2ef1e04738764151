"""Reading Broombridge YAML documents."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .config import ExtractionConfig
from .problem import TypedProblem, extract_problem
from .schema import BroombridgeDocument
from .spin_orbital import IndexConvention

logger = logging.getLogger(__name__)


def parse_broombridge(text: str) -> BroombridgeDocument:
    """
    Deserialize a Broombridge document from YAML text.

    The format version is resolved eagerly, so unsupported versions fail here.

    Raises:
        InvalidVersionError: If the document version is not supported
        pydantic.ValidationError: If a consumed field is missing or mistyped
    """
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Broombridge document must be a YAML mapping")
    document = BroombridgeDocument.model_validate(data)
    version = document.schema_version
    logger.debug(
        f"Parsed Broombridge {version.value} document with "
        f"{len(document.problem_description)} problem descriptions"
    )
    return document


def read_broombridge(filename: Union[str, Path]) -> BroombridgeDocument:
    """Read a Broombridge document from a YAML file."""
    with open(filename, "r") as f:
        return parse_broombridge(f.read())


def load_problems(
    filename: Union[str, Path],
    index_convention: Optional[IndexConvention] = None,
    config: Optional[ExtractionConfig] = None,
) -> List[TypedProblem]:
    """
    Read a Broombridge file and extract every problem description in it.

    Args:
        filename: Path to the YAML document
        index_convention: Convention used to flatten spin-orbital indices
        config: Extraction options

    Returns:
        One typed problem per problem description, in document order
    """
    document = read_broombridge(filename)
    return [
        extract_problem(problem, index_convention, config)
        for problem in document.problem_description
    ]
