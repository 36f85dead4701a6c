import pytest

from worldle.models.keypad import KeyHandle, Keypad


@pytest.fixture
def keypad():
    return Keypad()


def test_blank_cells_have_no_entry(keypad):
    assert len(keypad) == 28
    assert '' not in keypad
    assert keypad.get('') is None


def test_every_letter_has_a_key(keypad):
    assert sorted(keypad.letters()) == [chr(c) for c in range(ord('A'), ord('Z') + 1)]


def test_grid_placement(keypad):
    assert keypad['Q'] == KeyHandle('Q', 1, 1, 3)
    assert keypad['P'] == KeyHandle('P', 1, 19, 21)
    # Middle row is shifted one column right
    assert keypad['A'] == KeyHandle('A', 2, 2, 4)
    assert keypad['L'] == KeyHandle('L', 2, 18, 20)
    # Submit and delete are wide keys
    assert keypad['GO'] == KeyHandle('GO', 3, 1, 4)
    assert keypad['Z'] == KeyHandle('Z', 3, 4, 6)
    assert keypad['DEL'] == KeyHandle('DEL', 3, 18, 21)


def test_control_keys_are_not_letters(keypad):
    assert not keypad['GO'].is_letter
    assert not keypad['DEL'].is_letter
    assert keypad['M'].is_letter


def test_to_dict_lists_rows(keypad):
    data = keypad.to_dict()
    assert data['rows'][1] == ['A', 'S', 'D', 'F', 'G', 'H', 'J', 'K', 'L']
    assert data['keys'][0] == {'label': 'Q', 'row': 1, 'column_start': 1, 'column_end': 3}


def test_duplicate_labels_rejected():
    with pytest.raises(ValueError):
        Keypad([('A', 'B'), ('A', '')])
