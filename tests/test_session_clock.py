from dotqueens.components.session_clock import SessionClock, format_elapsed


def test_format_elapsed_uses_minutes_seconds_hundredths():
    assert format_elapsed(0) == "00:00.00"
    assert format_elapsed(75.5) == "01:15.50"
    assert format_elapsed(3599.99) == "59:59.99"


def test_clock_only_advances_while_running():
    clock = SessionClock()
    clock.advance(1.0)
    assert clock.elapsed == 0.0
    clock.start()
    clock.advance(0.25)
    clock.advance(0.25)
    clock.stop()
    clock.advance(5.0)
    assert clock.elapsed == 0.5
