"""
Redaadic: Japanese verb deinflection

Reverses masu, te and teiru inflections to recover candidate dictionary
forms for a downstream dictionary lookup.

Example:
    >>> import redaadic
    >>> for d in redaadic.deinflect("している"):
    ...     print(d.text, d.rule_chain)
"""

from typing import List, Optional

from redaadic.deinflector import Deinflection
from redaadic.deinflector import base_forms as _base_forms
from redaadic.deinflector import deinflect as _deinflect

__version__ = "0.1.0"


def deinflect(text: str, max_depth: Optional[int] = None) -> List[Deinflection]:
    """
    Deinflect a Japanese word.

    This is the main high-level API.

    Args:
        text: Inflected word, e.g. "住んでいます".
        max_depth: Optional limit on the number of rules in a chain.

    Returns:
        List of Deinflection records, the input itself first.
    """
    return _deinflect(text, max_depth=max_depth)


def base_forms(text: str, max_depth: Optional[int] = None) -> List[str]:
    """Distinct candidate texts for text, input first."""
    return _base_forms(text, max_depth=max_depth)
