"""Spin-orbital indices and the conventions used to flatten them."""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class Spin(int, Enum):
    """Electron spin label."""

    UP = 0
    DOWN = 1


class IndexConvention(str, Enum):
    """Schemes mapping (orbital, spin) to a single integer."""

    UP_DOWN = "up_down"  # 2 * orbital + spin
    HALF_UP = "half_up"  # orbital + n_orbitals * spin


class SpinOrbital(BaseModel):
    """A zero-based orbital index paired with a spin label."""

    orbital: int = Field(ge=0, description="Zero-based orbital index")
    spin: Spin = Field(description="Spin label")
    convention: IndexConvention = Field(
        default=IndexConvention.UP_DOWN,
        description="Indexing convention used to flatten the spin-orbital",
    )

    class Config:
        """Pydantic configuration."""

        frozen = True

    def to_int(self, n_orbitals: Optional[int] = None) -> int:
        """
        Flatten to a single integer under the configured convention.

        Args:
            n_orbitals: Number of spatial orbitals, required for ``HALF_UP``

        Returns:
            Integer in ``[0, 2 * n_orbitals)`` for a valid orbital
        """
        if self.convention == IndexConvention.UP_DOWN:
            return 2 * self.orbital + int(self.spin)
        if n_orbitals is None:
            raise ValueError("n_orbitals is required for the half_up convention")
        return self.orbital + n_orbitals * int(self.spin)

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Ordering key consistent with ``to_int`` for any orbital count."""
        if self.convention == IndexConvention.UP_DOWN:
            return (self.orbital, int(self.spin))
        return (int(self.spin), self.orbital)

    def __str__(self) -> str:
        return f"{self.orbital}{'a' if self.spin == Spin.UP else 'b'}"
