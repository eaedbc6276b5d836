# tests/services/test_positioning.py
from unittest.mock import MagicMock, patch

import pytest

from sponsor_service.services.positioning import resolve_position


@pytest.fixture
def mock_crud():
    with patch("sponsor_service.services.positioning.crud") as mock:
        mock.sponsor.max_position.return_value = 7
        yield mock


def place(**kwargs):
    defaults = dict(event_id=1, edition_id=2, requested=None, prior=None, keeps_slot=False)
    return resolve_position(MagicMock(), **{**defaults, **kwargs})


def test_new_sponsor_without_position_is_appended(mock_crud):
    assert place() == 8
    mock_crud.sponsor.shift_positions.assert_not_called()


def test_new_sponsor_at_position_makes_room(mock_crud):
    assert place(requested=3) == 3
    mock_crud.sponsor.shift_positions.assert_called_once()
    kwargs = mock_crud.sponsor.shift_positions.call_args.kwargs
    assert kwargs["from_position"] == 3
    assert kwargs["exclude_id"] is None


def test_update_without_position_keeps_current_slot(mock_crud):
    assert place(keeps_slot=True, prior=4, sponsor_id=9) == 4
    mock_crud.sponsor.shift_positions.assert_not_called()
    mock_crud.sponsor.max_position.assert_not_called()


def test_update_to_same_position_is_a_no_op(mock_crud):
    assert place(keeps_slot=True, prior=4, requested=4, sponsor_id=9) == 4
    mock_crud.sponsor.shift_positions.assert_not_called()


def test_update_to_new_position_excludes_itself_from_shift(mock_crud):
    assert place(keeps_slot=True, prior=4, requested=1, sponsor_id=9) == 1
    assert mock_crud.sponsor.shift_positions.call_args.kwargs["exclude_id"] == 9


def test_update_of_unpositioned_sponsor_is_appended(mock_crud):
    assert place(keeps_slot=True, prior=None, sponsor_id=9) == 8


def test_reclaimed_row_is_placed_like_a_new_one(mock_crud):
    assert place(keeps_slot=False, prior=None, sponsor_id=9) == 8
