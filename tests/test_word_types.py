"""
Tests for word_types.py - word type taxonomy and tag parsing.
"""

import pytest

from redaadic.word_types import (
    CHILDREN_MAP,
    WordType,
    children,
    lookup,
    parse_tags,
)


class TestLookup:
    """Tests for mapping external tags to word types."""

    @pytest.mark.parametrize("tag,expected", [
        ('v', WordType.V),
        ('v1', WordType.V1),
        ('v5', WordType.V5),
        ('v5d', WordType.V5D),
        ('v1d', WordType.V1D),
        ('vs', WordType.VS),
        ('vk', WordType.VK),
        ('vz', WordType.VZ),
        ('te_form', WordType.TE_FORM),
        ('masu_form', WordType.MASU_FORM),
        ('adj-i', WordType.ADJ_I),
    ])
    def test_known_tags(self, tag, expected):
        assert lookup(tag) is expected

    def test_adjective_uses_hyphen(self):
        """The i-adjective tag is 'adj-i', not the identifier spelling."""
        assert lookup('adj_i') is None
        assert WordType.ADJ_I.value == 'adj-i'

    def test_case_sensitive(self):
        assert lookup('V5') is None
        assert lookup('VS') is None

    @pytest.mark.parametrize("tag", ['', 'n', 'v5k', ' v5', 'adj-na'])
    def test_unknown_tags(self, tag):
        assert lookup(tag) is None


class TestChildren:
    """Tests for the generalization map."""

    def test_generic_verb(self):
        assert children(WordType.V) == [WordType.V1, WordType.V5, WordType.VS, WordType.VK]

    def test_ichidan(self):
        assert children(WordType.V1) == [WordType.V1D]

    def test_godan(self):
        assert WordType.V5.children == [WordType.V5D]

    @pytest.mark.parametrize("word_type", [
        WordType.V1D, WordType.V5D, WordType.VS, WordType.VK,
        WordType.TE_FORM, WordType.MASU_FORM, WordType.ADJ_I,
    ])
    def test_leaves(self, word_type):
        assert children(word_type) == []

    def test_children_returns_copy(self):
        children(WordType.V).append(WordType.ADJ_I)
        assert WordType.ADJ_I not in children(WordType.V)

    def test_map_is_read_only(self):
        with pytest.raises(TypeError):
            CHILDREN_MAP[WordType.ADJ_I] = (WordType.V,)
        with pytest.raises(AttributeError):
            CHILDREN_MAP[WordType.V].append(WordType.ADJ_I)
        assert children(WordType.ADJ_I) == []
        assert WordType.ADJ_I not in children(WordType.V)

    def test_map_is_forest(self):
        """Every type has at most one parent and no type reaches itself."""
        parents = {}
        for parent, kids in CHILDREN_MAP.items():
            for kid in kids:
                assert kid not in parents
                parents[kid] = parent

        for word_type in WordType:
            seen = {word_type}
            current = word_type
            while current in parents:
                current = parents[current]
                assert current not in seen
                seen.add(current)


class TestParseTags:
    """Tests for term-bank rules field parsing."""

    def test_single(self):
        assert parse_tags('v5') == frozenset([WordType.V5])

    def test_multiple(self):
        assert parse_tags('v5 vs') == frozenset([WordType.V5, WordType.VS])

    def test_unmapped_dropped(self):
        assert parse_tags('n v1 adj-na') == frozenset([WordType.V1])

    def test_extra_whitespace(self):
        assert parse_tags('  v1\tadj-i  ') == frozenset([WordType.V1, WordType.ADJ_I])

    def test_empty(self):
        assert parse_tags('') == frozenset()
