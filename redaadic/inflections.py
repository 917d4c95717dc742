"""
Inflection rule registry for redaadic.

Each rule category (masu, te, teiru) holds an ordered list of suffix
rewrites. A rewrite reads backwards: a form ending in ``inflection`` and
tagged with ``inflected_types`` (or not tagged yet) becomes a form ending in
``base`` tagged with ``base_types``.

The registry is built once at import and never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Tuple

from redaadic.word_types import WordType


# ============================================================================
# Rule Categories
# ============================================================================

class InflectionRule(Enum):
    """Named groups of rewrites. Values are display labels."""
    MASU = 'ーます'
    TE = 'ーて'
    TEIRU = 'ーいる'

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.name.lower()


# ============================================================================
# Rule Entries
# ============================================================================

@dataclass(frozen=True)
class Inflection:
    """
    A single reversible suffix substitution.

    Attributes:
        base: Suffix of the deinflected form.
        inflection: Suffix of the inflected form.
        base_types: Types of the deinflected form.
        inflected_types: Types the inflected form must carry, if tagged.
    """
    base: str
    inflection: str
    base_types: FrozenSet[WordType]
    inflected_types: FrozenSet[WordType]

    def match(self, text: str) -> bool:
        """Check whether text ends with this rule's inflected suffix."""
        return text.endswith(self.inflection)

    def applies_to(self, text: str, types: FrozenSet[WordType]) -> bool:
        """
        Full match predicate.

        Untagged text matches any rule; tagged text needs an exact type-set
        match (no subtype relation is involved).
        """
        return (not types or types == self.inflected_types) and self.match(text)

    def apply(self, text: str) -> str:
        """Replace the inflected suffix of text with the base suffix."""
        if self.inflection:
            text = text[:-len(self.inflection)]
        return text + self.base


def _rules(inflected: WordType,
           entries: Iterable[Tuple[str, str, WordType]]) -> Tuple[Inflection, ...]:
    """Build a category's entries from (base, inflection, base type) rows."""
    return tuple(
        Inflection(base, inflection, frozenset([base_type]), frozenset([inflected]))
        for base, inflection, base_type in entries
    )


V1D = WordType.V1D
V5D = WordType.V5D
VS = WordType.VS
VK = WordType.VK

# ~ます polite form
MASU_RULES = _rules(WordType.MASU_FORM, [
    ('る', 'ます', V1D),

    ('う', 'います', V5D),
    ('つ', 'ちます', V5D),
    ('る', 'ります', V5D),
    ('ぬ', 'にます', V5D),
    ('ぶ', 'びます', V5D),
    ('む', 'みます', V5D),
    ('く', 'きます', V5D),
    ('ぐ', 'ぎます', V5D),
    ('す', 'します', V5D),

    ('する', 'します', VS),
    ('為る', '為ます', VS),

    ('くる', 'きます', VK),
    ('来る', '来ます', VK),
    ('來る', '來ます', VK),
])

# ~て conjunctive form, with godan sound changes
TE_RULES = _rules(WordType.TE_FORM, [
    ('る', 'て', V1D),

    ('う', 'って', V5D),
    ('つ', 'って', V5D),
    ('る', 'って', V5D),

    ('ぬ', 'んで', V5D),
    ('ぶ', 'んで', V5D),
    ('む', 'んで', V5D),

    ('く', 'いて', V5D),
    ('ぐ', 'いで', V5D),
    ('す', 'して', V5D),

    ('する', 'して', VS),
    ('為る', '為て', VS),

    ('くる', 'きて', VK),
    ('来る', '来て', VK),
    ('來る', '來て', VK),
])

# ~ている progressive; the result conjugates as an ichidan verb
TEIRU_RULES = tuple(
    Inflection(base, inflection, frozenset([WordType.TE_FORM]), frozenset([V1D]))
    for base, inflection in [
        ('て', 'ている'),
        ('て', 'てる'),

        ('で', 'でいる'),
        ('で', 'でる'),
    ]
)

# Iteration order is observable in deinflect() output.
INFLECTION_RULES: Mapping[InflectionRule, Tuple[Inflection, ...]] = MappingProxyType({
    InflectionRule.MASU: MASU_RULES,
    InflectionRule.TE: TE_RULES,
    InflectionRule.TEIRU: TEIRU_RULES,
})


def rules_for(category: InflectionRule) -> Tuple[Inflection, ...]:
    """Get the ordered entries of one rule category."""
    return INFLECTION_RULES[category]
