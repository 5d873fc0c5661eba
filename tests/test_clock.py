import pytest

from spritekit.clock import Clock, ClockSettings


class FakeTime:
    def __init__(self, values):
        self.values = list(values)

    def __call__(self):
        return self.values.pop(0)


def make_clock(values):
    sleeps = []
    return Clock(FakeTime(values), sleeps.append), sleeps


def test_default_tick_interval():
    assert ClockSettings().tick_interval == 256


def test_update_computes_delta_and_elapsed():
    clock, _ = make_clock([10.0, 10.0, 10.5, 11.25])
    clock.start()
    clock.update()
    assert clock.delta_time == pytest.approx(0.5)
    clock.update()
    assert clock.delta_time == pytest.approx(0.75)
    assert clock.elapsed_time == pytest.approx(1.25)
    assert clock.tick_accumulator == pytest.approx(1.25)


def test_fps_counted_after_one_second():
    clock, _ = make_clock([0.0, 0.0, 0.4, 0.8, 1.2])
    clock.start()
    for _ in range(3):
        clock.update()
    assert clock.fps == 3
    assert clock.frame_count == 0
    assert clock.fps_timer == 0.0


def test_tick_wraps_at_16_bits():
    clock, _ = make_clock([])
    clock.current_tick = 0xFFFF
    clock.tick()
    assert clock.current_tick == 0


def test_target_fps():
    clock, _ = make_clock([])
    clock.set_target_fps(50)
    assert clock.target_fps == 50
    assert clock.target_frame_time == pytest.approx(1 / 50)
    clock.set_target_fps(0)
    assert clock.target_frame_time == 0.0


def test_wait_sleeps_remaining_time():
    clock, sleeps = make_clock([0.0, 0.0, 0.0, 0.005])
    clock.start()
    clock.update()
    clock.set_target_fps(100)
    clock.wait_for_frame_end()
    assert len(sleeps) == 1
    assert sleeps[0] == pytest.approx(0.01 - 0.005)


def test_wait_without_target_does_not_sleep():
    clock, sleeps = make_clock([0.0, 0.0])
    clock.start()
    clock.wait_for_frame_end()
    assert sleeps == []


def test_raw_time_reads_source():
    clock, _ = make_clock([42.0])
    assert clock.raw_time() == 42.0