"""Compile-related models."""
from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class CompileOutcome:
    """
    Result of one build-and-run invocation.

    ``output`` holds the combined stdout/stderr of whichever step failed
    first, or of the successful run.
    """
    output: bytes
    failed: bool

    def text(self) -> str:
        """Decode the captured output for rendering."""
        return self.output.decode("utf-8", errors="replace")


class CompileResponse(BaseModel):
    """JSON envelope returned by the compile API."""

    output: str = Field(default="", description="Captured program or build output")
    failed: bool = Field(default=False, description="Whether the build or run failed")

    @classmethod
    def from_outcome(cls, outcome: CompileOutcome) -> "CompileResponse":
        return cls(output=outcome.text(), failed=outcome.failed)
