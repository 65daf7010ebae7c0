# Path: unifind/process/names_list/query.py
"""
Query Match Predicate

A query is a set of lower-cased terms with AND semantics: a target list
matches when every term is a substring of at least one target string.

A record is accepted when:
    - the query is empty (match everything), or
    - every term is found in the record's description lines, or
    - every term is found in {category name, subcategory}
"""

from dataclasses import dataclass
from typing import Sequence

from ...models.names_list import CharacterRecord


@dataclass(frozen=True)
class Query:
    """
    Parsed search query.

    Attributes:
        text: Query as given by the caller
        terms: Distinct lower-cased terms, in order of first appearance
    """
    text: str
    terms: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> 'Query':
        """
        Build a query from free text.

        Args:
            text: Free-text query; split on whitespace

        Returns:
            Query (no terms for empty or blank text)
        """
        terms = tuple(dict.fromkeys(text.lower().split()))
        return cls(text=text, terms=terms)

    @property
    def matches_everything(self) -> bool:
        return not self.terms

    def match_all(self, targets: Sequence[str]) -> bool:
        """
        True when every term is a substring of at least one target.

        Args:
            targets: Lower-cased strings to search

        Returns:
            True when all terms are found (vacuously True with no terms)
        """
        for term in self.terms:
            if not any(term in target for target in targets):
                return False
        return True

    def accepts(self, record: CharacterRecord) -> bool:
        """
        Evaluate the match predicate against a fully assembled record.

        Args:
            record: Record with lower-cased description lines

        Returns:
            True when the record belongs in the result set
        """
        if self.matches_everything:
            return True

        if self.match_all(record.description):
            return True

        fallback = (record.category.name.lower(), record.subcategory.lower())
        return self.match_all(fallback)


__all__ = ['Query']
