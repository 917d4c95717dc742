"""
Pydantic models for redaadic API responses.

Usage:
    from redaadic.models import DeinflectionResponse
    from redaadic.deinflector import deinflect

    response = DeinflectionResponse.from_deinflections("来ます", deinflect("来ます"))
    print(response.model_dump_json())
"""

from typing import List

from pydantic import BaseModel, Field

from redaadic.deinflector import Deinflection


class DeinflectionResult(BaseModel):
    """A single deinflection candidate."""
    text: str = Field(..., description="Candidate base form")
    rules: List[str] = Field(default_factory=list, description="Applied rule categories, e.g. ['teiru', 'te']")
    types: List[str] = Field(default_factory=list, description="Word type tags reached, e.g. ['vs']")

    @classmethod
    def from_deinflection(cls, d: Deinflection) -> "DeinflectionResult":
        """Create DeinflectionResult from a Deinflection record."""
        return cls(
            text=d.text,
            rules=d.rule_chain,
            types=sorted(t.value for t in d.types),
        )

    @property
    def is_identity(self) -> bool:
        return not self.rules


class DeinflectionResponse(BaseModel):
    """
    All candidates for one surface form.

    Example response:
        {
            "surface": "来ます",
            "candidates": [
                {"text": "来ます", "rules": [], "types": []},
                {"text": "来る", "rules": ["masu"], "types": ["v1d"]},
                {"text": "来る", "rules": ["masu"], "types": ["vk"]}
            ],
            "count": 3
        }
    """
    surface: str = Field(..., description="Input text")
    candidates: List[DeinflectionResult] = Field(..., description="Candidates in discovery order")
    count: int = Field(..., description="Number of candidates")

    @classmethod
    def from_deinflections(
        cls,
        surface: str,
        deinflections: List[Deinflection],
    ) -> "DeinflectionResponse":
        """
        Create DeinflectionResponse from deinflect() output.

        Args:
            surface: The text that was deinflected.
            deinflections: Output from deinflect(surface).

        Returns:
            DeinflectionResponse with one entry per candidate.
        """
        candidates = [DeinflectionResult.from_deinflection(d) for d in deinflections]
        return cls(
            surface=surface,
            candidates=candidates,
            count=len(candidates),
        )
