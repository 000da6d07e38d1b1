import pytest

from core.desktop.devtools.interface.tui_viewport import (
    adjust_scroll,
    clamp_index,
    half_page_jump,
    visible_range,
    window_height,
)


def test_window_height_never_below_one():
    assert window_height(24, 4) == 20
    assert window_height(3, 4) == 1
    assert window_height(0, 4) == 1


def test_clamp_index():
    assert clamp_index(5, 0) == 0
    assert clamp_index(-1, 3) == 0
    assert clamp_index(7, 3) == 2


def test_scroll_follows_cursor_down_and_up():
    assert adjust_scroll(100, 10, 10, 0) == 1
    assert adjust_scroll(100, 3, 10, 5) == 3
    assert adjust_scroll(100, 7, 10, 5) == 5


def test_scroll_never_past_end():
    # after a deletion the list shrank under the old offset
    assert adjust_scroll(12, 11, 10, 30) == 2
    assert adjust_scroll(5, 2, 10, 3) == 0


@pytest.mark.parametrize("total", [0, 1, 5, 30])
@pytest.mark.parametrize("window", [1, 4, 10])
def test_cursor_always_visible(total, window):
    offset = 0
    for current in list(range(total)) + list(reversed(range(total))):
        offset = adjust_scroll(total, current, window, offset)
        assert 0 <= offset <= max(0, total - window)
        if total:
            assert offset <= current < offset + window


def test_half_page_jump_moves_half_window_and_clamps():
    assert half_page_jump(100, 0, 20, 1) == 10
    assert half_page_jump(100, 15, 20, -1) == 5
    assert half_page_jump(100, 3, 20, -1) == 0
    assert half_page_jump(12, 8, 20, 1) == 11


def test_half_page_jump_is_a_noop_in_a_one_row_window():
    assert half_page_jump(5, 0, 1, 1) == 0
    assert half_page_jump(5, 3, 1, -1) == 3
    assert half_page_jump(5, 0, 3, 1) == 1


def test_visible_range():
    assert visible_range(50, 10, 20) == (10, 30)
    assert visible_range(5, 0, 20) == (0, 5)
    assert visible_range(0, 0, 20) == (0, 0)
    assert visible_range(25, 40, 20) == (5, 25)
