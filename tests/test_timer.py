import pytest

from enschin.timer import Timer


@pytest.fixture(autouse=True)
def _restore_global_state():
    yield
    Timer.start_all()


def test_initial_state():
    t = Timer(0.25, 1.0)
    assert t.value == 0.25
    assert t.triggered is False
    assert t.active is True


def test_update_accumulates_without_trigger():
    t = Timer(0.0, 1.0)
    t.update(0.5)
    assert t.value == 0.5
    assert t.triggered is False
    assert t.take() is False


def test_update_wraps_and_triggers():
    t = Timer(0.0, 1.0)
    t.update(0.5)
    t.update(0.75)
    assert t.value == 0.0
    assert t.triggered is True
    t.update(0.25)
    assert t.triggered is False
    assert t.value == 0.25


def test_increment_rate_scales_delta():
    t = Timer(0.0, 10.0, 4.0)
    t.update(0.5)
    assert t.value == 0.5 * 4.0


def test_take_consumes_total():
    t = Timer(0.0, 1.0)
    t.update(0.75)
    t.update(0.5)
    assert t.take() is True
    assert t.take() is False


def test_take_resets_total_to_start_value():
    t = Timer(0.0, 0.25)
    t.update(0.5)
    assert t.take() is True
    t.update(0.125)
    assert t.take() is False
    t.update(0.25)
    assert t.take() is True


def test_negative_increment_counts_down():
    t = Timer(1.0, 0.0, -1.0)
    t.update(0.5)
    assert t.value == 0.5
    assert t.triggered is False
    t.update(0.75)
    assert t.value == 1.0
    assert t.triggered is True
    assert t.take() is True


def test_zero_increment_never_triggers():
    t = Timer(0.0, 1.0, 0.0)
    for _ in range(5):
        t.update(10.0)
    assert t.triggered is False
    assert t.take() is False
    assert t.value == 0.0


def test_start_and_stop():
    t = Timer(0.0, 1.0, active=False)
    assert t.active is False
    t.start()
    assert t.active is True
    t.stop()
    assert t.active is False


def test_start_all_and_stop_all():
    Timer.stop_all()
    assert Timer.is_active_all() is False
    Timer.start_all()
    assert Timer.is_active_all() is True


def test_global_state_is_shared_between_instances():
    a = Timer(0.0, 1.0)
    a.stop_all()
    assert Timer(0.0, 2.0).is_active_all() is False