"""Request/response schemas for packing challenges."""

from typing import List

from pydantic import BaseModel, Field, NonNegativeInt

from cubepack.algorithms.first_fit import PackingResult
from cubepack.runner.cubes import SortOrder


class ChallengeRequest(BaseModel):
    """A container size plus a run-length cube descriptor."""
    length: int = Field(gt=0, description="Container X extent")
    width: int = Field(gt=0, description="Container Y extent")
    height: int = Field(gt=0, description="Container Z extent")
    counts: List[NonNegativeInt] = Field(min_length=1, description="Cube count per edge length, 1 first")
    order: SortOrder = Field(default=SortOrder.DESC, description="Size order fed to the packer")

    @property
    def dims(self) -> tuple:
        return (self.length, self.width, self.height)

    @property
    def cube_count(self) -> int:
        return sum(self.counts)


class ChallengeResult(BaseModel):
    """Final state of the container after packing."""
    placed_count: int = Field(ge=0)
    filled_volume: int = Field(ge=0)
    unfilled_volume: int = Field(ge=0)
    passes: int = Field(ge=0)
    solved: bool

    @classmethod
    def from_packing(cls, result: PackingResult) -> "ChallengeResult":
        return cls(
            placed_count=result.placed_count,
            filled_volume=result.filled_volume,
            unfilled_volume=result.unfilled_volume,
            passes=result.passes,
            solved=result.solved,
        )
