"""
Turns a raw search string and a set of selected specialties into one
``Predicate`` value. The page query and the count query both consume the
same predicate, so the total always reflects exactly the filter that
produced the page.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

# Letters and digits only; the FTS tokenizer splits on "_" like any punctuation
_WORD_CHARS = re.compile(r"[^\W_]")


class Strategy(str, Enum):
    PLAIN = "plain"
    SEARCH = "search"
    TAGS = "tags"
    SEARCH_AND_TAGS = "search_and_tags"


class Order(str, Enum):
    RELEVANCE = "relevance"
    IDENTITY = "identity"


@dataclass(frozen=True)
class MatchTerm:
    text: str
    prefix: bool = False

    def render(self) -> str:
        quoted = '"' + self.text.replace('"', '""') + '"'
        return quoted + "*" if self.prefix else quoted


@dataclass(frozen=True)
class MatchExpression:
    """AND of exact terms, with a prefix match on the final term."""

    terms: tuple[MatchTerm, ...]

    def render(self) -> str:
        # Terms are quoted so user input never becomes FTS5 operators
        return " AND ".join(term.render() for term in self.terms)


@dataclass(frozen=True)
class Predicate:
    match: MatchExpression | None = None
    tags: tuple[str, ...] = ()

    @property
    def strategy(self) -> Strategy:
        if self.match is not None and self.tags:
            return Strategy.SEARCH_AND_TAGS
        if self.match is not None:
            return Strategy.SEARCH
        if self.tags:
            return Strategy.TAGS
        return Strategy.PLAIN

    @property
    def order(self) -> Order:
        return Order.RELEVANCE if self.match is not None else Order.IDENTITY


def tokenize(raw: str | None) -> list[str]:
    """Split on whitespace, dropping words with no letters or digits."""
    if not raw:
        return []
    return [word for word in raw.split() if _WORD_CHARS.search(word)]


def build_match_expression(raw: str | None) -> MatchExpression | None:
    """Build the ranked-match expression for a possibly multi-word search.

    Every word but the last must match exactly; the last word is a prefix
    match since the user is probably still typing it. ``"john smith"``
    becomes ``"john" AND "smith"*``.
    """
    words = tokenize(raw)
    if not words:
        return None
    terms = [MatchTerm(word) for word in words[:-1]]
    terms.append(MatchTerm(words[-1], prefix=True))
    return MatchExpression(tuple(terms))


def normalize_tags(tags: Iterable[str] | None) -> tuple[str, ...]:
    if not tags:
        return ()
    seen: dict[str, None] = {}
    for tag in tags:
        cleaned = tag.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return tuple(seen)


def build_predicate(search: str | None, tags: Iterable[str] | None) -> Predicate:
    return Predicate(match=build_match_expression(search), tags=normalize_tags(tags))
