"""
Tests for models.py - pydantic response models.
"""

import json

from redaadic.deinflector import Deinflection, deinflect
from redaadic.inflections import InflectionRule
from redaadic.models import DeinflectionResponse, DeinflectionResult
from redaadic.word_types import WordType


class TestDeinflectionResult:
    """Tests for a single candidate model."""

    def test_from_identity(self):
        result = DeinflectionResult.from_deinflection(Deinflection("猫"))
        assert result.text == "猫"
        assert result.rules == []
        assert result.types == []
        assert result.is_identity

    def test_from_chain(self):
        d = Deinflection(
            "する",
            (InflectionRule.TEIRU, InflectionRule.TE),
            frozenset([WordType.VS]),
        )
        result = DeinflectionResult.from_deinflection(d)
        assert result.rules == ["teiru", "te"]
        assert result.types == ["vs"]
        assert not result.is_identity

    def test_types_sorted(self):
        d = Deinflection("x", (InflectionRule.MASU,), frozenset([WordType.VS, WordType.ADJ_I, WordType.V1D]))
        assert DeinflectionResult.from_deinflection(d).types == ["adj-i", "v1d", "vs"]


class TestDeinflectionResponse:
    """Tests for the per-surface response model."""

    def test_from_deinflections(self):
        response = DeinflectionResponse.from_deinflections("来ます", deinflect("来ます"))
        assert response.surface == "来ます"
        assert response.count == 3
        assert response.model_dump() == {
            "surface": "来ます",
            "candidates": [
                {"text": "来ます", "rules": [], "types": []},
                {"text": "来る", "rules": ["masu"], "types": ["v1d"]},
                {"text": "来る", "rules": ["masu"], "types": ["vk"]},
            ],
            "count": 3,
        }

    def test_json(self):
        response = DeinflectionResponse.from_deinflections("猫", deinflect("猫"))
        data = json.loads(response.model_dump_json())
        assert data["candidates"][0]["text"] == "猫"

    def test_empty(self):
        response = DeinflectionResponse.from_deinflections("", [])
        assert response.candidates == []
        assert response.count == 0
