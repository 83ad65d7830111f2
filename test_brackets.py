"""Tests for the bracket depth log."""

import pytest

from brackets import BracketDepthLog


def test_empty_log_has_zero_depth():
    log = BracketDepthLog()
    assert log.depth() == 0
    assert len(log) == 0


def test_open_and_close_track_depth():
    log = BracketDepthLog()
    log.open(0)
    log.open(1)
    assert log.depth() == 2
    log.close(3)
    assert log.depth() == 1
    assert [(e.position, e.depth) for e in log] == [(0, 1), (1, 2), (3, 1)]


def test_close_below_zero_is_recorded():
    log = BracketDepthLog()
    log.close(0)
    assert log.depth() == -1


@pytest.mark.parametrize("events, expected", [
    # "(5"
    ([('open', 0)], 0),
    # "((5)"
    ([('open', 0), ('open', 1), ('close', 3)], 3),
    # "(()("
    ([('open', 0), ('open', 1), ('close', 2), ('open', 3)], 3),
    # "(1+(2"
    ([('open', 0), ('open', 3)], 3),
    # "((1)(2)"
    ([('open', 0), ('open', 1), ('close', 3), ('open', 4), ('close', 6)], 6),
])
def test_find_unmatched_open_position(events, expected):
    log = BracketDepthLog()
    for action, position in events:
        getattr(log, action)(position)
    assert log.find_unmatched_open_position() == expected


def test_find_unmatched_open_position_requires_open_bracket():
    log = BracketDepthLog()
    with pytest.raises(ValueError):
        log.find_unmatched_open_position()
    log.open(0)
    log.close(1)
    with pytest.raises(ValueError):
        log.find_unmatched_open_position()


def test_clear():
    log = BracketDepthLog()
    log.open(0)
    log.clear()
    assert log.depth() == 0
    assert len(log) == 0
