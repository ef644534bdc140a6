import pytest

from pagination import clamp_page, compute_state, page_count


@pytest.mark.parametrize(
    "total, size, expected",
    [
        (0, 25, 1),
        (1, 25, 1),
        (25, 25, 1),
        (26, 25, 2),
        (500, 25, 20),
        (501, 25, 21),
        (7, 1, 7),
    ],
)
def test_page_count(total, size, expected):
    assert page_count(total, size) == expected


def test_page_count_matches_ceiling_for_many_sizes():
    for size in range(1, 12):
        for total in range(0, 60):
            expected = max(1, -(-total // size))
            assert page_count(total, size) == expected


@pytest.mark.parametrize("page, expected", [(-5, 1), (0, 1), (3, 3), (10**9, 20)])
def test_clamp_page(page, expected):
    assert clamp_page(page, 20) == expected


@pytest.mark.parametrize("page", [-5, 10**9])
def test_compute_state_clamps_out_of_range(page):
    state = compute_state(page, 20, 10)
    assert 1 <= state.current_page <= 20


def test_first_page_of_twenty():
    state = compute_state(1, 20, 10)
    assert state.visible_button_count == 12
    assert state.show_prev_ellipsis is False
    assert state.show_next_ellipsis is True
    assert state.prev_enabled is False
    assert state.next_enabled is True
    assert state.visible_page_numbers == tuple(range(1, 11))
    assert state.show_first_button is False
    assert state.show_last_button is True


def test_last_page_of_twenty():
    state = compute_state(20, 20, 10)
    assert state.show_next_ellipsis is False
    assert state.show_prev_ellipsis is True
    assert state.next_enabled is False
    assert state.prev_enabled is True
    assert state.visible_page_numbers == tuple(range(11, 21))
    assert state.show_first_button is True
    assert state.show_last_button is False


@pytest.mark.parametrize(
    "page, prev, nxt, window",
    [
        (7, False, True, range(1, 11)),
        (8, True, True, range(3, 13)),
        (14, True, True, range(9, 19)),
        (15, True, False, range(11, 21)),
    ],
)
def test_window_transitions_across_twenty_pages(page, prev, nxt, window):
    state = compute_state(page, 20, 10)
    assert state.show_prev_ellipsis is prev
    assert state.show_next_ellipsis is nxt
    assert state.visible_page_numbers == tuple(window)


def test_centered_window_with_odd_body():
    state = compute_state(10, 20, 5)
    assert state.show_prev_ellipsis and state.show_next_ellipsis
    assert state.visible_page_numbers == (8, 9, 10, 11, 12)


def test_one_page_more_than_budget_needs_no_ellipsis():
    for page in range(1, 12):
        state = compute_state(page, 11, 10)
        assert not state.show_prev_ellipsis
        assert not state.show_next_ellipsis
        assert state.visible_page_numbers == tuple(range(2, 12))
        assert state.show_first_button is True
        assert state.show_last_button is False


def test_few_pages_show_every_page_in_body():
    state = compute_state(3, 5, 10)
    assert state.visible_button_count == 7
    assert state.visible_page_numbers == (1, 2, 3, 4, 5)
    assert not state.show_first_button
    assert not state.show_last_button


def test_single_page():
    state = compute_state(1, 1, 10)
    assert state.visible_page_numbers == (1,)
    assert not state.show_prev_ellipsis
    assert not state.show_next_ellipsis
    assert not state.prev_enabled
    assert not state.next_enabled


def test_window_length_matches_body_slots():
    for total in range(1, 40):
        for middle in range(1, 12):
            for page in range(1, total + 1):
                state = compute_state(page, total, middle)
                assert len(state.visible_page_numbers) == state.visible_button_count - 2


def test_never_both_ellipses_when_pages_fit_budget():
    for middle in range(1, 12):
        for total in range(1, middle + 1):
            for page in range(1, total + 1):
                state = compute_state(page, total, middle)
                assert not (state.show_prev_ellipsis and state.show_next_ellipsis)


def test_compute_state_is_idempotent():
    assert compute_state(9, 20, 10) == compute_state(9, 20, 10)


def test_quick_jump_step_is_body_size():
    assert compute_state(1, 20, 10).quick_jump_step == 10
    assert compute_state(1, 4, 10).quick_jump_step == 4
