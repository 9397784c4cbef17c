"""
Loading of URL lists, wordlists and filter lists.
All three share the same on-disk format: one token per line.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from revelio.core.exceptions import InputError, ListFileError


DEFAULT_WORDLIST = Path(__file__).resolve().parent.parent / "data" / "wordlist.txt"


def load_list(filepath) -> List[str]:
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ListFileError(str(filepath), str(e))

    return [line.strip() for line in text.splitlines() if line.strip()]


def resolve_urls(url: Optional[str] = None, url_list: Optional[str] = None) -> List[str]:
    if url:
        return [url]
    if url_list:
        return load_list(url_list)
    return []


def resolve_variables(
    words: Sequence[str] = (),
    wordlist: Optional[str] = None,
    default_wordlist: Path = DEFAULT_WORDLIST
) -> List[str]:
    """
    Pick the variable names for dictionary mode.

    Explicit words win over a wordlist file, which wins over the bundled
    default wordlist.
    """
    if words:
        return list(words)
    if wordlist:
        return load_list(wordlist)

    try:
        return load_list(default_wordlist)
    except ListFileError as e:
        raise InputError(
            f"Error reading default wordlist: {e.reason}. "
            "Please provide a wordlist using -W option or individual words using -w option."
        )


def resolve_filters(filters: Sequence[str] = (), filter_list: Optional[str] = None) -> List[str]:
    merged = list(filters)
    if filter_list:
        merged.extend(load_list(filter_list))
    return merged
