"""
Word Provider

Resolves the daily solution from a mapping of date keys ("YYYY-M-D", no zero
padding) to base64-encoded words. The mapping can live in a local JSON file
or behind a URL that serves the same JSON.
"""

import base64
import binascii
import json
import logging
from datetime import date
from typing import Dict, Optional

import requests

from ..config.game_settings import WORD_LENGTH
from .exceptions import SolutionUnavailableError

logger = logging.getLogger(__name__)


def date_key(day: date) -> str:
    """Format a date the way the word mapping is keyed."""
    return f"{day.year}-{day.month}-{day.day}"


def decode_word(encoded: str) -> str:
    """
    Decode one base64 entry into an uppercase solution word.

    Raises:
        SolutionUnavailableError: If the entry is not valid base64 or does not
            decode to a word of the right length
    """
    try:
        word = base64.b64decode(encoded, validate=True).decode('ascii').strip().upper()
    except (binascii.Error, UnicodeDecodeError, TypeError) as e:
        raise SolutionUnavailableError(f"Malformed word entry '{encoded}': {e}")

    if len(word) != WORD_LENGTH or not (word.isascii() and word.isalpha()):
        raise SolutionUnavailableError(
            f"Word entry does not decode to a {WORD_LENGTH}-letter word"
        )
    return word


class WordProvider:
    """
    Base provider. Subclasses supply `load_mapping()`; lookup and decoding
    are shared.
    """

    def load_mapping(self) -> Dict[str, str]:
        raise NotImplementedError

    def get_solution(self, day: Optional[date] = None) -> str:
        """
        Return the solution for `day` (today, local calendar, by default).

        Raises:
            SolutionUnavailableError: If the mapping can't be loaded or has no
                valid entry for that day
        """
        day = day or date.today()
        key = date_key(day)
        mapping = self.load_mapping()

        if not isinstance(mapping, dict):
            raise SolutionUnavailableError("Word mapping must be a JSON object")

        encoded = mapping.get(key)
        if encoded is None:
            raise SolutionUnavailableError(f"No word scheduled for {key}")

        word = decode_word(encoded)
        logger.debug("Resolved solution for %s", key)
        return word


class JsonFileWordProvider(WordProvider):
    """Reads the mapping from a JSON file on disk."""

    def __init__(self, path: str):
        self.path = path

    def load_mapping(self) -> Dict[str, str]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            raise SolutionUnavailableError(f"Word file not found: {self.path}")
        except (OSError, json.JSONDecodeError) as e:
            raise SolutionUnavailableError(f"Could not read word file {self.path}: {e}")


class HttpWordProvider(WordProvider):
    """Fetches the mapping from a URL serving the same JSON."""

    def __init__(self, url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def load_mapping(self) -> Dict[str, str]:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            raise SolutionUnavailableError(f"Could not fetch word list from {self.url}: {e}")
        except ValueError as e:
            raise SolutionUnavailableError(f"Word list at {self.url} is not valid JSON: {e}")


def create_word_provider(app_config) -> WordProvider:
    """Pick a provider from configuration: WORDS_URL wins over WORDS_FILE."""
    url = app_config.get('WORDS_URL')
    if url:
        return HttpWordProvider(url, timeout=app_config.get('WORDS_TIMEOUT_SECONDS', 5.0))
    return JsonFileWordProvider(app_config['WORDS_FILE'])
