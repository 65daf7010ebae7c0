# Path: tests/unit/test_http_fetcher.py
"""
Unit Tests for HTTPFetcher

Tests fetching with a mocked requests session:
- Successful fetch
- Retry on connection errors / timeouts only
"""

from unittest.mock import MagicMock

import pytest
import requests

from unifind.loaders.http_fetcher import HTTPFetcher

URL = 'https://example.org/ucd/NamesList.txt'


def make_response(content=b'data', status_code=200, error=None):
    response = MagicMock()
    response.content = content
    response.status_code = status_code
    response.headers = {'Content-Type': 'text/plain'}
    if error is not None:
        response.raise_for_status.side_effect = error
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def fetcher(mock_config, session):
    return HTTPFetcher(mock_config, session=session)


class TestHTTPFetcherInit:
    """Test configuration handling."""

    def test_reads_config(self, fetcher):
        assert fetcher.http_timeout == 5
        assert fetcher.max_retries == 3
        assert fetcher.user_agent == 'unifind-test'

    def test_default_session_has_user_agent(self, mock_config):
        fetcher = HTTPFetcher(mock_config)

        assert isinstance(fetcher.session, requests.Session)
        assert fetcher.session.headers['User-Agent'] == 'unifind-test'

    def test_at_least_one_attempt(self, make_config, session):
        fetcher = HTTPFetcher(make_config({'http_max_retries': 0}), session=session)

        assert fetcher.max_retries == 1


class TestFetch:
    """Test fetch()."""

    def test_returns_body(self, fetcher, session):
        session.get.return_value = make_response(b'hello')

        assert fetcher.fetch(URL) == b'hello'
        session.get.assert_called_once_with(URL, timeout=5, allow_redirects=True)

    def test_http_error_not_retried(self, fetcher, session):
        session.get.return_value = make_response(
            status_code=404, error=requests.exceptions.HTTPError('404')
        )

        with pytest.raises(requests.exceptions.HTTPError):
            fetcher.fetch(URL)

        assert session.get.call_count == 1

    def test_connection_error_retried_then_succeeds(self, fetcher, session):
        session.get.side_effect = [
            requests.exceptions.ConnectionError('reset'),
            make_response(b'ok'),
        ]

        assert fetcher.fetch(URL) == b'ok'
        assert session.get.call_count == 2

    def test_timeout_exhausts_retries(self, fetcher, session):
        session.get.side_effect = requests.exceptions.Timeout('slow')

        with pytest.raises(requests.exceptions.Timeout):
            fetcher.fetch(URL)

        assert session.get.call_count == 3
