from emberfield.events import ButtonAction, MouseInput, MouseScroll


def test_button_action_from_raw_code_registers_press():
    mouse = MouseInput()
    mouse.on_mouse_button(2, ButtonAction(1))
    assert mouse.check_mouse_button(2) is True
    assert mouse.check_mouse_button(2) is False


def test_first_cursor_event_gives_zero_offset():
    mouse = MouseInput()
    mouse.on_cursor_pos(100.0, 200.0)
    assert mouse.cursor_position() == (0.0, 0.0)


def test_cursor_offsets_reverse_y():
    mouse = MouseInput()
    mouse.on_cursor_pos(100.0, 200.0)
    mouse.on_cursor_pos(110.0, 190.0)
    assert mouse.cursor_position() == (110.0 - 100.0, 200.0 - 190.0)


def test_mouse_moved_tracks_x_offset():
    mouse = MouseInput()
    assert mouse.mouse_moved() is False
    mouse.on_cursor_pos(0.0, 0.0)
    mouse.on_cursor_pos(5.0, 0.0)
    assert mouse.mouse_moved() is True
    assert mouse.mouse_moved() is False


def test_mouse_moved_ignores_y_only_change():
    mouse = MouseInput()
    mouse.on_cursor_pos(0.0, 0.0)
    mouse.on_cursor_pos(0.0, 7.0)
    assert mouse.cursor_position()[1] == -7.0
    assert mouse.mouse_moved() is False


def test_scroll_up_then_down():
    mouse = MouseInput()
    mouse.on_scroll(0.0, 1.0)
    assert mouse.scroll_state() == MouseScroll(increase=True, decrease=False)
    assert mouse.scroll_state() == MouseScroll(increase=False, decrease=False)
    mouse.on_scroll(0.0, 0.0)
    assert mouse.scroll_state() == MouseScroll(increase=False, decrease=True)


def test_scroll_same_value_keeps_pending_state():
    mouse = MouseInput()
    mouse.on_scroll(0.0, 2.0)
    mouse.on_scroll(0.0, 2.0)
    assert mouse.scroll_state().increase is True


def test_button_press_is_consumed_once():
    mouse = MouseInput()
    mouse.on_mouse_button(1, ButtonAction.PRESS)
    assert mouse.check_mouse_button(2) is False
    assert mouse.check_mouse_button(1) is True
    assert mouse.check_mouse_button(1) is False


def test_button_repeat_counts_as_press():
    mouse = MouseInput()
    mouse.on_mouse_button(3, ButtonAction.REPEAT)
    assert mouse.check_mouse_button(3) is True


def test_release_leaves_button_state():
    mouse = MouseInput()
    mouse.on_mouse_button(1, ButtonAction.PRESS)
    mouse.on_mouse_button(1, ButtonAction.RELEASE)
    assert mouse.check_mouse_button(1) is True


def test_initial_button_is_zero():
    mouse = MouseInput()
    assert mouse.check_mouse_button(0) is True
    assert mouse.check_mouse_button(0) is False