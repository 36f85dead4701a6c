import threading
from datetime import date

import pytest

from conftest import FakeValidator, RecordingRenderer, StaticWordProvider
from worldle.models.game import SubmitResult
from worldle.services.exceptions import SolutionUnavailableError
from worldle.services.game_service import GameService
from worldle.services.input_router import InputAction


class DatedWordProvider(StaticWordProvider):
    def __init__(self):
        super().__init__('HELLO')
        self.days = []

    def get_solution(self, day=None):
        self.days.append(day)
        return super().get_solution(day)


@pytest.fixture
def service():
    return GameService(StaticWordProvider('HELLO'), FakeValidator())


def test_create_game_uses_todays_date():
    provider = DatedWordProvider()
    service = GameService(provider, FakeValidator(), today=lambda: date(2024, 3, 9))

    engine = service.create_game('sid-1', RecordingRenderer())

    assert provider.days == [date(2024, 3, 9)]
    assert engine.solution == 'HELLO'
    assert service.get_game('sid-1') is engine


def test_create_game_without_word_raises():
    service = GameService(StaticWordProvider(None), FakeValidator())

    with pytest.raises(SolutionUnavailableError):
        service.create_game('sid-1', RecordingRenderer())
    assert service.get_game('sid-1') is None


def test_input_routed_to_the_right_game(service):
    first = service.create_game('a', RecordingRenderer())
    second = service.create_game('b', RecordingRenderer())

    service.handle_input('a', (InputAction.APPEND, 'H'))

    assert first.current_col == 1
    assert second.current_col == 0
    assert service.handle_input('missing', (InputAction.APPEND, 'H')) is None


class GatedRenderer(RecordingRenderer):
    """Holds the first cell update until `release` is set."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def on_cell_updated(self, row, col, letter):
        super().on_cell_updated(row, col, letter)
        if not self.entered.is_set():
            self.entered.set()
            self.release.wait(5)


class GatedValidator(FakeValidator):
    """Holds every lookup until `release` is set."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def is_valid_word(self, word):
        self.entered.set()
        self.release.wait(5)
        return super().is_valid_word(word)


def in_thread(fn, *args):
    results = []
    thread = threading.Thread(target=lambda: results.append(fn(*args)), daemon=True)
    thread.start()
    return thread, results


def test_edit_waits_for_edit_in_progress(service):
    renderer = GatedRenderer()
    engine = service.create_game('a', renderer)

    first, first_result = in_thread(service.handle_input, 'a', (InputAction.APPEND, 'H'))
    assert renderer.entered.wait(5)
    second, second_result = in_thread(service.handle_input, 'a', (InputAction.APPEND, 'E'))
    second.join(0.1)
    assert second.is_alive()

    renderer.release.set()
    first.join(5)
    second.join(5)

    assert first_result == [True]
    assert second_result == [True]
    assert engine.current_word() == 'HE'
    assert renderer.named('cell_updated') == [(0, 0, 'H'), (0, 1, 'E')]


def test_input_dropped_while_submit_in_flight():
    validator = GatedValidator()
    service = GameService(StaticWordProvider('HELLO'), validator)
    engine = service.create_game('a', RecordingRenderer())
    for letter in 'WORLD':
        service.handle_input('a', (InputAction.APPEND, letter))

    submit, submit_result = in_thread(service.handle_input, 'a', (InputAction.SUBMIT, None))
    assert validator.entered.wait(5)
    try:
        assert service.handle_input('a', (InputAction.DELETE, None)) is None
        assert service.handle_input('a', (InputAction.SUBMIT, None)) is None
    finally:
        validator.release.set()
        submit.join(5)

    assert submit_result == [SubmitResult.CONTINUE]
    assert validator.checked == ['WORLD']
    assert engine.grid[0] == list('WORLD')
    assert engine.current_row == 1
    assert service.handle_input('a', (InputAction.APPEND, 'H')) is True


def test_end_game(service):
    service.create_game('a', RecordingRenderer())

    assert service.end_game('a') is True
    assert service.end_game('a') is False
    assert service.get_game('a') is None
