# Path: unifind/process/search.py
"""
Character Search

Composes the Document Provider and the NamesList parser:

    query text -> Query -> provider.fetch(url) -> parser.parse -> SearchResult

The whole result set is computed before it is returned.
"""

from typing import Optional

from ..config_loader import ConfigLoader
from ..constants import UNICODE_NAMES_LIST_URL
from ..core.logger import get_process_logger
from ..loaders.document_provider import DocumentProvider
from ..models.names_list import SearchResult
from .names_list import NamesListParser, Query


class CharacterSearch:
    """
    Searches NamesList.txt for characters matching a free-text query.

    Example:
        search = CharacterSearch()
        result = search.search('capital a')
        for record in result:
            print(record.notation, record.name)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        provider: Optional[DocumentProvider] = None,
        parser: Optional[NamesListParser] = None,
    ):
        """
        Initialize search.

        Args:
            config: Optional ConfigLoader instance
            provider: Optional DocumentProvider
            parser: Optional NamesListParser
        """
        self.config = config if config else ConfigLoader()
        self.provider = provider if provider else DocumentProvider(self.config)
        self.parser = parser if parser else NamesListParser()
        self.document_url = self.config.get('names_list_url', UNICODE_NAMES_LIST_URL)
        self.logger = get_process_logger('search')

    def search(self, query_text: str) -> SearchResult:
        """
        Run one search.

        Args:
            query_text: Free-text query; empty matches every record

        Returns:
            SearchResult (possibly empty)

        Raises:
            DocumentProviderError: If the document cannot be obtained
        """
        query = Query.parse(query_text)
        self.logger.info(f"Searching {self.document_url} for terms {list(query.terms)}")

        with self.provider.fetch(self.document_url) as stream:
            result = self.parser.parse(stream, query)

        self.logger.info(f"{len(result)} records matched {query_text!r}")
        return result


__all__ = ['CharacterSearch']
