"""Configuration for Broombridge problem extraction."""

from pydantic import BaseModel, Field

from .spin_orbital import IndexConvention


class ExtractionConfig(BaseModel):
    """
    Options controlling how a problem description is turned into a
    typed problem.
    """

    index_convention: IndexConvention = Field(
        default=IndexConvention.UP_DOWN,
        description="Convention used to flatten spin-orbital indices",
    )
    reject_duplicate_labels: bool = Field(
        default=True,
        description="Raise on repeated initial state labels instead of keeping the last",
    )
    strict_state_methods: bool = Field(
        default=False,
        description="Raise on unrecognized initial state methods while parsing",
    )
    check_orbital_range: bool = Field(
        default=True,
        description="Reject orbital indices not below the declared orbital count",
    )

    class Config:
        """Pydantic configuration."""

        frozen = True
