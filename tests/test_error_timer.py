from app.error_timer import ErrorRecoveryTimer


def test_fires_once_after_delay(clock):
    timer = ErrorRecoveryTimer(1.5, clock=clock)
    timer.schedule()
    assert timer.active

    clock.advance(1.4)
    assert not timer.poll()
    assert timer.remaining() > 0

    clock.advance(0.1)
    assert timer.poll()
    assert not timer.active
    assert not timer.poll()


def test_cancel(clock):
    timer = ErrorRecoveryTimer(1.5, clock=clock)
    timer.schedule()
    timer.cancel()
    clock.advance(5)
    assert not timer.poll()
    assert timer.remaining() == 0.0


def test_reschedule_pushes_deadline(clock):
    timer = ErrorRecoveryTimer(1.5, clock=clock)
    timer.schedule()
    clock.advance(1.0)
    timer.schedule()
    clock.advance(1.0)
    assert not timer.poll()
    clock.advance(0.5)
    assert timer.poll()


def test_idle_timer_never_fires(clock):
    timer = ErrorRecoveryTimer(clock=clock)
    assert timer.delay == 1.5
    assert not timer.active
    assert not timer.poll()
