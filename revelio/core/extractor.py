"""
Assignment extraction over normalized JavaScript.
Finds `name = "value"` and `name: 'value'` occurrences and applies the
dictionary, length and substring filters to the captured names.
"""

import re
from functools import lru_cache
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from revelio.models import ExtractionMode, Finding


IDENTIFIER = r'[a-zA-Z_$][a-zA-Z0-9_$]*'

# value body: escaped closing quote or any character, shortest run
QUOTED_VALUE = r'''\s*[:=]\s*(['"])((?:\\\2|.)*?)\2'''


def build_enumeration_pattern() -> "re.Pattern":
    return re.compile(rf'(?<!\.)({IDENTIFIER})(?:\.{IDENTIFIER})*{QUOTED_VALUE}')


def build_dictionary_pattern(names: Iterable[str]) -> "re.Pattern":
    """
    Single-alternation matcher over an explicit name list.

    Names are escaped, so wordlist entries are always matched literally. A
    name must start at an identifier boundary and be followed directly by the
    assignment token, so `config.apiKey = "x"` never matches `config`, and
    `mytoken = "x"` never matches `token`.
    """
    alternatives = [re.escape(name) for name in names if name]
    if not alternatives:
        raise ValueError("Dictionary pattern needs at least one name")
    return re.compile(rf'(?<![\w$.])({"|".join(alternatives)}){QUOTED_VALUE}')


@lru_cache(maxsize=32)
def _cached_dictionary_pattern(names: Tuple[str, ...]) -> "re.Pattern":
    return build_dictionary_pattern(names)


ASSIGNMENT_PATTERN = build_enumeration_pattern()


class VariableExtractor:

    def __init__(self, pattern: Optional["re.Pattern"] = None):
        self.pattern = pattern or ASSIGNMENT_PATTERN

    def scan(self, source: str, pattern: Optional["re.Pattern"] = None) -> Iterator[Finding]:
        if not source:
            return
        for match in (pattern or self.pattern).finditer(source):
            yield Finding(name=match.group(1), value=match.group(3))

    def extract(
        self,
        source: str,
        mode: ExtractionMode,
        variables: Iterable[str] = (),
        filters: Sequence[str] = (),
        min_length: int = 0
    ) -> List[Finding]:
        if mode == ExtractionMode.DICTIONARY:
            names = tuple(sorted({name for name in variables if name}))
            if not names:
                return []
            return list(self.scan(source, _cached_dictionary_pattern(names)))

        return [
            f for f in self.scan(source)
            if self.passes_filters(f.name, filters, min_length)
        ]

    @staticmethod
    def passes_filters(name: str, filters: Sequence[str], min_length: int = 0) -> bool:
        if len(name) < (min_length or 0):
            return False
        if not filters:
            return True
        lowered = name.lower()
        return any(word.lower() in lowered for word in filters)


_default_extractor = VariableExtractor()


def extract(
    source: str,
    mode: ExtractionMode,
    variables: Iterable[str] = (),
    filters: Sequence[str] = (),
    min_length: int = 0
) -> List[Finding]:
    return _default_extractor.extract(source, mode, variables, filters, min_length)
