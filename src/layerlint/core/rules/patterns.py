from __future__ import annotations

"""
Name Pattern Helpers.

Regex compilation and name normalization shared by the naming rules.
"""

import re
from typing import Iterable, List, Tuple

from layerlint.domain.constants import COPY_SUFFIX_PATTERN

_COPY_SUFFIX_RX = re.compile(COPY_SUFFIX_PATTERN)
_WORD_RX = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")


def compile_patterns(patterns: Iterable[str]) -> Tuple[List[re.Pattern], List[str]]:
    """
    Compile raw regex strings case-insensitively.

    Malformed expressions are set aside instead of aborting, so callers
    can report them as configuration warnings.

    Args:
        patterns: Raw regex strings.

    Returns:
        Tuple[List[re.Pattern], List[str]]: (Compiled patterns, rejected sources).
    """
    compiled: List[re.Pattern] = []
    rejected: List[str] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p, re.IGNORECASE))
        except re.error:
            rejected.append(p)
    return compiled, rejected


def matches_any(name: str, compiled_patterns: Iterable[re.Pattern]) -> bool:
    return any(rx.search(name) for rx in compiled_patterns)


def strip_copy_suffix(name: str) -> str:
    """
    Remove a trailing duplicate marker such as ' (copy)', ' (copy 2)' or ' copy 3'.

    A bare trailing word only counts in lower case, so 'Body Copy' keeps
    its name while 'Body copy' becomes 'Body'. A name that consists of the
    marker alone is returned unchanged.
    """
    base = _COPY_SUFFIX_RX.sub("", name).strip()
    return base or name.strip()


def name_words(name: str) -> List[str]:
    """
    Split a layer name into lower-case words.

    Handles separators as well as camelCase ('mainNav' -> ['main', 'nav']).
    """
    return [w.lower() for w in _WORD_RX.findall(name)]
