"""
Deinflection search for redaadic.

Starting from a surface form, every rule whose predicate holds is reversed,
and the resulting forms are searched again, breadth first. The output lists
every form ever reached, in discovery order, starting with the input itself.

Example:
    >>> from redaadic.deinflector import deinflect
    >>> for d in deinflect("来ます"):
    ...     print(d.text, d.rule_chain, sorted(str(t) for t in d.types))
    来ます [] []
    来る ['masu'] ['v1d']
    来る ['masu'] ['vk']
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from redaadic.inflections import INFLECTION_RULES, InflectionRule
from redaadic.word_types import WordType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Deinflection:
    """
    A candidate base form.

    Attributes:
        text: Candidate text.
        inflections: Rule categories applied, outermost first.
        types: Word types reached (empty for the untouched input).
    """
    text: str
    inflections: Tuple[InflectionRule, ...] = ()
    types: FrozenSet[WordType] = frozenset()

    @property
    def rule_chain(self) -> List[str]:
        """Category names of the applied rules, e.g. ['teiru', 'te']."""
        return [str(rule) for rule in self.inflections]

    @property
    def depth(self) -> int:
        return len(self.inflections)

    @property
    def is_identity(self) -> bool:
        return not self.inflections


def deinflect(text: str, max_depth: Optional[int] = None) -> List[Deinflection]:
    """
    Find every form reachable from text by reversing inflection rules.

    Duplicates are kept: two rule chains reaching the same text give two
    records.

    Args:
        text: Surface form.
        max_depth: Maximum number of rules in a chain. None means no limit.

    Returns:
        List of Deinflection, identity record first.

    Raises:
        ValueError: If max_depth is negative.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    deinflections = [Deinflection(text)]
    capped = False

    # The list grows while we walk it.
    i = 0
    while i < len(deinflections):
        current = deinflections[i]
        i += 1

        children = _expand(current)
        if max_depth is not None and current.depth >= max_depth:
            capped = capped or bool(children)
            continue
        deinflections.extend(children)

    if capped:
        logger.debug(f"Depth cap {max_depth} reached for {text!r}")
    logger.debug(f"{len(deinflections)} deinflection candidates for {text!r}")
    return deinflections


def _expand(current: Deinflection) -> List[Deinflection]:
    """Apply every matching rule to one state, in registry order."""
    children = []
    for rule, inflections in INFLECTION_RULES.items():
        for inflection in inflections:
            if not inflection.applies_to(current.text, current.types):
                continue
            children.append(Deinflection(
                text=inflection.apply(current.text),
                inflections=current.inflections + (rule,),
                types=inflection.base_types,
            ))
    return children


def base_forms(text: str, max_depth: Optional[int] = None) -> List[str]:
    """
    Get the distinct candidate texts for text, in discovery order.

    Intended as input to a dictionary lookup.
    """
    seen = set()
    forms = []
    for d in deinflect(text, max_depth=max_depth):
        if d.text not in seen:
            seen.add(d.text)
            forms.append(d.text)
    return forms
