import os
import tempfile

# Keep test logs out of the working tree; must run before worldle is imported.
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='worldle-logs-'))

import pytest

from worldle.models.renderer import Renderer
from worldle.services.dictionary import DictionaryValidator
from worldle.services.exceptions import DictionaryUnavailableError, SolutionUnavailableError
from worldle.services.game_engine import GameEngine
from worldle.services.word_provider import WordProvider


class RecordingRenderer(Renderer):
    """Keeps every notification as (name, args) in call order."""

    def __init__(self):
        self.calls = []

    def on_cell_updated(self, row, col, letter):
        self.calls.append(('cell_updated', (row, col, letter)))

    def on_classification(self, row, classifications):
        self.calls.append(('classification', (row, classifications)))

    def on_key_status(self, letter, status):
        self.calls.append(('key_status', (letter, status)))

    def on_message(self, text, duration_ms):
        self.calls.append(('message', (text, duration_ms)))

    def on_shake(self, row):
        self.calls.append(('shake', (row,)))

    def on_game_over(self, outcome, attempts, solution):
        self.calls.append(('game_over', (outcome, attempts, solution)))

    def named(self, name):
        return [args for call, args in self.calls if call == name]


class FakeValidator(DictionaryValidator):
    """Accepts everything except `rejected`; raises while `unavailable` is set."""

    def __init__(self, rejected=(), unavailable=False):
        self.rejected = {w.upper() for w in rejected}
        self.unavailable = unavailable
        self.checked = []

    def is_valid_word(self, word):
        self.checked.append(word)
        if self.unavailable:
            raise DictionaryUnavailableError("lookup timed out")
        return word.upper() not in self.rejected


class StaticWordProvider(WordProvider):
    def __init__(self, word='HELLO'):
        self.word = word

    def get_solution(self, day=None):
        if self.word is None:
            raise SolutionUnavailableError("No word scheduled")
        return self.word


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def validator():
    return FakeValidator()


@pytest.fixture
def engine(validator, renderer):
    return GameEngine('HELLO', validator, renderer)


def type_word(engine, word):
    for letter in word:
        engine.append_letter(letter)
