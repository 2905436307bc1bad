import pytest

from animforge.mouse import Mouse, MouseEvent, MouseEventType


def _drain(mouse):
    events = []
    while True:
        event = mouse.read()
        if event.is_end_of_queue():
            return events
        events.append(event)


def test_new_mouse_is_idle():
    mouse = Mouse()
    assert not mouse.is_active()
    assert not mouse.is_in_use()
    assert (mouse.x, mouse.y) == (0, 0)


def test_read_on_empty_queue_returns_end_marker():
    mouse = Mouse()
    event = mouse.read()
    assert event.is_end_of_queue()
    assert event == MouseEvent()


def test_left_click_records_state_and_event():
    mouse = Mouse()
    mouse.on_left_click(5, 9)
    assert mouse.left_is_clicked
    assert mouse.is_in_use()
    event = mouse.read()
    assert event.type is MouseEventType.LEFT_CLICK
    assert (event.x, event.y) == (5, 9)
    assert event.left_was_clicked
    assert not event.right_was_clicked


def test_release_clears_button():
    mouse = Mouse()
    mouse.on_right_click(1, 2)
    mouse.on_right_release(3, 4)
    assert not mouse.right_is_clicked
    events = _drain(mouse)
    assert [e.type for e in events] == [MouseEventType.RIGHT_CLICK, MouseEventType.RIGHT_RELEASE]
    assert events[1].right_was_clicked is False
    assert (mouse.x, mouse.y) == (3, 4)


def test_middle_click_and_release():
    mouse = Mouse()
    mouse.on_middle_click(0, 0)
    assert mouse.middle_is_clicked
    mouse.on_middle_release(0, 0)
    assert not mouse.middle_is_clicked
    assert [e.type for e in _drain(mouse)] == [
        MouseEventType.MIDDLE_CLICK,
        MouseEventType.MIDDLE_RELEASE,
    ]


def test_double_clicks_do_not_change_buttons():
    mouse = Mouse()
    mouse.on_left_double_click(2, 2)
    mouse.on_right_double_click(3, 3)
    assert not mouse.is_in_use()
    assert [e.type for e in _drain(mouse)] == [
        MouseEventType.LEFT_DOUBLE_CLICK,
        MouseEventType.RIGHT_DOUBLE_CLICK,
    ]


def test_events_come_out_in_order():
    mouse = Mouse()
    mouse.on_mouse_move(1, 1)
    mouse.on_mouse_move(2, 2)
    mouse.on_mouse_move(3, 3)
    assert [e.x for e in _drain(mouse)] == [1, 2, 3]
    assert not mouse.is_active()


def test_queue_is_trimmed_to_buffer_size():
    mouse = Mouse()
    total = Mouse.BUFFER_SIZE + 8
    for i in range(total):
        mouse.on_mouse_move(i, i)
    events = _drain(mouse)
    assert len(events) == Mouse.BUFFER_SIZE - 1
    assert events[0].x == total - (Mouse.BUFFER_SIZE - 1)
    assert events[-1].x == total - 1


def test_enter_and_leave_window():
    mouse = Mouse()
    mouse.on_mouse_enter()
    assert mouse.is_in_window
    mouse.on_mouse_leave()
    assert not mouse.is_in_window
    events = _drain(mouse)
    assert [e.type for e in events] == [MouseEventType.ENTER_WINDOW, MouseEventType.LEAVE_WINDOW]
    assert events[0].was_in_window and not events[1].was_in_window


@pytest.mark.parametrize(
    "notches, expected",
    [(1, MouseEventType.SCROLL_UP), (-1, MouseEventType.SCROLL_DOWN)],
)
def test_full_wheel_notch_gives_one_event(notches, expected):
    mouse = Mouse()
    mouse.on_wheel_scroll(notches * 120)
    assert [e.type for e in _drain(mouse)] == [expected]


def test_two_notches_give_two_events():
    mouse = Mouse()
    mouse.on_wheel_scroll(240)
    assert [e.type for e in _drain(mouse)] == [MouseEventType.SCROLL_UP] * 2


def test_partial_notch_is_carried_over():
    mouse = Mouse()
    mouse.on_wheel_scroll(60)
    assert len(_drain(mouse)) == 1
    mouse.on_wheel_scroll(60)
    assert _drain(mouse) == []


def test_scroll_event_keeps_position():
    mouse = Mouse()
    mouse.on_mouse_move(7, 8)
    mouse.read()
    mouse.on_wheel_scroll(-120)
    event = mouse.read()
    assert (event.x, event.y) == (7, 8)


def test_clear_mouse_states():
    mouse = Mouse()
    mouse.on_left_click(0, 0)
    mouse.on_right_click(0, 0)
    mouse.on_middle_click(0, 0)
    mouse.clear_mouse_states()
    assert not mouse.is_in_use()
    assert mouse.is_active()


def test_empty_event_queue():
    mouse = Mouse()
    mouse.on_mouse_move(1, 1)
    mouse.empty_event_queue()
    assert not mouse.is_active()
    assert mouse.read().is_end_of_queue()


def test_reset_restores_initial_state():
    mouse = Mouse()
    mouse.on_mouse_enter()
    mouse.on_left_click(4, 4)
    mouse.on_wheel_scroll(60)
    mouse.reset()
    assert not mouse.is_active()
    assert not mouse.is_in_use()
    assert not mouse.is_in_window
    assert (mouse.x, mouse.y) == (0, 0)
    mouse.on_wheel_scroll(120)
    assert [e.type for e in _drain(mouse)] == [MouseEventType.SCROLL_UP]