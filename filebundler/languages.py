# filebundler/languages.py
from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Tuple

ALL_LANGUAGES = "all"

# language id -> file extensions it selects (lower-case, with leading dot)
SUPPORTED_LANGUAGES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "cs": (".cs",),
        "c": (".c",),
        "cpp": (".cpp",),
        "js": (".js",),
        "jsx": (".jsx",),
        "py": (".py",),
        "java": (".java",),
        "txt": (".txt",),
    }
)


def supported_languages_text() -> str:
    return ", ".join(SUPPORTED_LANGUAGES)


def select_languages(selector: str) -> List[str]:
    """
    Resolve a --language value into supported language ids.

    "all" (any case) expands to every supported id. Anything else is split on
    commas; tokens are trimmed and lower-cased, and unknown ones are dropped.
    Input order is kept and duplicates are not collapsed.
    """
    if selector is None:
        return []

    if selector.strip().lower() == ALL_LANGUAGES:
        return list(SUPPORTED_LANGUAGES)

    selected: List[str] = []
    for token in selector.split(","):
        lang = token.strip().lower()
        if lang and lang in SUPPORTED_LANGUAGES:
            selected.append(lang)
    return selected


def extensions_for(languages: Iterable[str]) -> FrozenSet[str]:
    extensions = set()
    for lang in languages:
        extensions.update(SUPPORTED_LANGUAGES[lang])
    return frozenset(extensions)
