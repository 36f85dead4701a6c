"""
Dictionary Validators

Decide whether a submitted guess is a real word. A definite "no" is a normal
answer; anything that leaves the question open raises
DictionaryUnavailableError so the player can retry.
"""

import logging
from typing import Iterable, Optional

import requests

from ..config.game_settings import WORD_SET
from .exceptions import DictionaryUnavailableError

logger = logging.getLogger(__name__)


class DictionaryValidator:
    """Base validator."""

    def is_valid_word(self, word: str) -> bool:
        raise NotImplementedError


class DictionaryApiValidator(DictionaryValidator):
    """
    Looks words up in a dictionary HTTP API.

    A 404 means the word does not exist; any 2xx means it does. Timeouts,
    connection errors and every other status are indeterminate.
    """

    def __init__(self,
                 url_template: str = 'https://api.dictionaryapi.dev/api/v2/entries/en/{word}',
                 timeout: float = 5.0,
                 session: Optional[requests.Session] = None):
        self.url_template = url_template
        self.timeout = timeout
        self.session = session or requests.Session()

    def is_valid_word(self, word: str) -> bool:
        url = self.url_template.format(word=word.lower())
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout:
            raise DictionaryUnavailableError(f"Dictionary lookup timed out after {self.timeout}s")
        except requests.exceptions.RequestException as e:
            raise DictionaryUnavailableError(f"Dictionary lookup failed: {e}")

        logger.debug("Dictionary lookup for %s returned %s", word, response.status_code)

        if response.status_code == 404:
            return False
        if 200 <= response.status_code < 300:
            return True
        raise DictionaryUnavailableError(
            f"Dictionary lookup returned unexpected status {response.status_code}"
        )


class WordListValidator(DictionaryValidator):
    """Offline validator backed by an in-memory word list."""

    def __init__(self, words: Optional[Iterable[str]] = None):
        self.words = frozenset(w.upper() for w in words) if words is not None else WORD_SET

    def is_valid_word(self, word: str) -> bool:
        return word.upper() in self.words


def create_dictionary_validator(app_config) -> DictionaryValidator:
    """Build the validator named by DICTIONARY_BACKEND."""
    backend = app_config.get('DICTIONARY_BACKEND', 'api')
    if backend == 'api':
        return DictionaryApiValidator(
            url_template=app_config['DICTIONARY_API_URL'],
            timeout=app_config.get('DICTIONARY_TIMEOUT_SECONDS', 5.0),
        )
    if backend == 'wordlist':
        return WordListValidator()
    raise ValueError(f"Unknown dictionary backend '{backend}'. Must be 'api' or 'wordlist'")
