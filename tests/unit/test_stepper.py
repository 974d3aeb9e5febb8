"""Tests for the playback Stepper."""

import pytest

from algorithms import generate
from engine.stepper import SPEED_PRESETS, Stepper, StepperState, slider_to_delay


@pytest.fixture
def stepper():
    # bubble sort on [3, 2, 1]: cmp, swap, cmp, swap, cmp, swap, final
    s = Stepper()
    s.start(generate("bubbleSort", [3, 2, 1]))
    return s


class TestLifecycle:
    def test_start_drains_and_shows_first_step(self, stepper):
        assert stepper.total_steps == 7
        assert stepper.current_idx == 0
        assert stepper.state == StepperState.PAUSED
        assert stepper.current_step.compared == [0, 1]

    def test_first_step_is_not_counted(self, stepper):
        assert stepper.comparisons == 0
        assert stepper.swaps == 0

    def test_new_start_discards_previous_run(self, stepper):
        stepper.jump_to_end()
        stepper.start(generate("insertionSort", [2, 1]))
        assert stepper.total_steps == 4
        assert stepper.current_idx == 0
        assert stepper.comparisons == 0
        assert stepper.swaps == 0

    def test_clear_goes_idle(self, stepper):
        stepper.clear()
        assert stepper.state == StepperState.IDLE
        assert stepper.current_step is None
        assert stepper.total_steps == 0

    def test_reset_keeps_trace(self, stepper):
        steps = stepper.steps
        stepper.goto_step(5)
        stepper.reset()
        assert stepper.steps is steps
        assert stepper.current_idx == 0
        assert (stepper.comparisons, stepper.swaps) == (0, 0)
        assert stepper.state == StepperState.PAUSED


class TestCounting:
    def test_next_step_counts_markers(self, stepper):
        stepper.next_step()
        assert (stepper.comparisons, stepper.swaps) == (0, 2)
        stepper.next_step()
        assert (stepper.comparisons, stepper.swaps) == (2, 2)

    def test_forward_jump_counts_skipped_steps(self, stepper):
        stepper.goto_step(3)
        assert (stepper.comparisons, stepper.swaps) == (2, 4)

    def test_backward_jump_recomputes(self, stepper):
        stepper.goto_step(5)
        stepper.goto_step(1)
        assert (stepper.comparisons, stepper.swaps) == (0, 2)

    def test_jump_to_end_totals(self, stepper):
        stepper.jump_to_end()
        assert stepper.current_idx == 6
        assert (stepper.comparisons, stepper.swaps) == (4, 6)
        assert stepper.is_finished

    def test_stepping_matches_jumping(self):
        a = Stepper()
        a.start(generate("quickSort", [9, 4, 7, 1, 8, 2]))
        b = Stepper()
        b.start(generate("quickSort", [9, 4, 7, 1, 8, 2]))
        while a.next_step():
            pass
        b.jump_to_end()
        assert (a.comparisons, a.swaps) == (b.comparisons, b.swaps)


class TestNavigation:
    def test_next_at_end_returns_false(self, stepper):
        stepper.jump_to_end()
        before = (stepper.comparisons, stepper.swaps)
        assert stepper.next_step() is False
        assert (stepper.comparisons, stepper.swaps) == before

    def test_prev_at_start_returns_false(self, stepper):
        assert stepper.prev_step() is False

    def test_prev_after_finish_pauses(self, stepper):
        stepper.jump_to_end()
        assert stepper.prev_step()
        assert stepper.state == StepperState.PAUSED

    def test_goto_out_of_range(self, stepper):
        assert stepper.goto_step(7) is False
        assert stepper.goto_step(-1) is False
        assert stepper.current_idx == 0

    def test_on_step_callback(self):
        seen = []
        s = Stepper(on_step=seen.append)
        s.start(generate("linearSearch", [4, 5], 5))
        s.next_step()
        assert [st.step_number for st in seen] == [0, 1]


class TestPlayback:
    def test_play_pause_toggle(self, stepper):
        stepper.toggle_play()
        assert stepper.is_playing
        stepper.toggle_play()
        assert stepper.state == StepperState.PAUSED

    def test_play_ignored_when_idle(self):
        s = Stepper()
        s.play()
        assert s.state == StepperState.IDLE

    def test_tick_advances_when_delay_elapsed(self, stepper):
        stepper.set_speed_value(0.001)
        stepper.play()
        stepper._last_tick -= 1.0
        assert stepper.tick() is True
        assert stepper.current_idx == 1

    def test_tick_does_nothing_when_paused(self, stepper):
        stepper._last_tick -= 1.0
        assert stepper.tick() is False
        assert stepper.current_idx == 0

    def test_playing_to_last_step_finishes(self, stepper):
        stepper.goto_step(5)
        stepper.play()
        assert stepper.next_step()
        assert stepper.is_finished

    def test_single_step_while_playing(self, stepper):
        stepper.play()
        assert stepper.next_step()
        assert stepper.current_idx == 1


class TestSpeed:
    def test_presets(self, stepper):
        stepper.set_speed("slow")
        assert stepper.speed == SPEED_PRESETS["slow"]
        stepper.set_speed("unknown")
        assert stepper.speed == SPEED_PRESETS["medium"]

    def test_slider_mapping(self):
        assert slider_to_delay(200) == pytest.approx(0.001)
        assert slider_to_delay(10) == pytest.approx(0.191)
        assert slider_to_delay(500) == pytest.approx(0.001)

    def test_snapshot(self, stepper):
        stepper.next_step()
        snap = stepper.snapshot()
        assert snap["state"] == "paused"
        assert snap["current_step"] == 1
        assert snap["total_steps"] == 7
        assert snap["swaps"] == 2
