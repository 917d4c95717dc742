"""
Word type taxonomy for redaadic.

Word types are the conjugation-class tags used by Yomitan-format term banks
(the ``rules`` field of a term entry) plus two intermediate states that only
exist during deinflection:

    v         - Generic verb
    v1 / v1d  - Ichidan verb
    v5 / v5d  - Godan verb
    vs        - Irregular suru verb
    vk        - Irregular kuru verb
    vz        - Zuru verb
    te_form   - Conjunctive (~て form), intermediate
    masu_form - Polite (~ます form), intermediate
    adj-i     - I-adjective

The generalization map (v -> v1, v5, ...) is informational only: rule
matching compares type sets for exact equality.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


# ============================================================================
# Word Types
# ============================================================================

class WordType(str, Enum):
    """Conjugation class tags. Values are the external term-bank tags."""
    V = 'v'
    V1 = 'v1'
    V5 = 'v5'
    V5D = 'v5d'
    V1D = 'v1d'
    VS = 'vs'
    VK = 'vk'
    VZ = 'vz'
    TE_FORM = 'te_form'
    MASU_FORM = 'masu_form'
    ADJ_I = 'adj-i'

    @property
    def children(self) -> List['WordType']:
        """Direct subtypes of this word type."""
        return children(self)

    def __str__(self) -> str:
        return self.value


# Parent -> direct children. Must stay a forest.
CHILDREN_MAP: Mapping[WordType, Tuple[WordType, ...]] = MappingProxyType({
    WordType.V: (WordType.V1, WordType.V5, WordType.VS, WordType.VK),
    WordType.V1: (WordType.V1D,),
    WordType.V5: (WordType.V5D,),
})

_TAG_LOOKUP: Dict[str, WordType] = {wt.value: wt for wt in WordType}


def lookup(tag: str) -> Optional[WordType]:
    """
    Map an external tag string to a WordType.

    Matching is exact and case-sensitive. Unknown tags are not an error.

    Args:
        tag: Tag as found in a dictionary, e.g. 'v5' or 'adj-i'.

    Returns:
        The matching WordType, or None.
    """
    return _TAG_LOOKUP.get(tag)


def children(word_type: WordType) -> List[WordType]:
    """Get the direct subtypes of a word type (empty if none declared)."""
    return list(CHILDREN_MAP.get(word_type, ()))


def parse_tags(tags: str) -> FrozenSet[WordType]:
    """
    Parse a whitespace-separated term-bank rules field.

    Tags without a WordType are dropped.

    Example:
        >>> sorted(t.value for t in parse_tags("v5 vs n"))
        ['v5', 'vs']
    """
    result = set()
    for tag in tags.split():
        word_type = lookup(tag)
        if word_type is None:
            logger.debug(f"Ignoring unmapped tag: {tag!r}")
            continue
        result.add(word_type)
    return frozenset(result)
