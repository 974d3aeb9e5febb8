"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object the UI interacts with during a run.
It drains the algorithm generator up front into a step list, then
replays that list and exposes a clean play/pause/next/prev/speed API.

It also keeps the two running counters shown in the Stats panel.  The
counting rule: every step advanced over adds len(compared) comparisons
and len(swapped) swaps.  Step 0 is the starting frame and never counts.
Jumping forward counts the skipped steps too; going backward recomputes
from the start.

State machine:
    IDLE     →  start()          →  PAUSED
    PAUSED   →  play()           →  PLAYING
    PLAYING  →  pause()          →  PAUSED
    PLAYING  →  (last step)      →  FINISHED
    any      →  reset()          →  PAUSED at step 0 (same trace)
    any      →  clear()          →  IDLE

A trace cannot be restarted from its generator.  A new run (different
algorithm, array or target) gets a new start() call, which throws the
old step list away.

Thread safety:
  The methods themselves are NOT thread-safe.  Callers that share one
  Stepper between threads (the web app: timer ticks and button clicks
  for the same session) hold `stepper.lock` around every call.
"""

import threading
import time
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Any

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # teaching mode
    "medium": 0.1,
    "fast":   0.03,   # demo mode
    "turbo":  0.001,
}

# the speed slider runs 10..200; higher is faster
SLIDER_MIN = 10
SLIDER_MAX = 200


def slider_to_delay(value: int) -> float:
    """Slider value → seconds between steps (201 - value milliseconds)."""
    value = max(SLIDER_MIN, min(SLIDER_MAX, int(value)))
    return (SLIDER_MAX + 1 - value) / 1000.0


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : Every Step of the run, drained from the generator.
        current_idx : Index into `steps` that is currently displayed.
        comparisons : Running comparison count up to current_idx.
        swaps       : Running swap/move count up to current_idx.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time current step changes.
                      The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.steps:       List[Step]    = []
        self.current_idx: int          = -1
        self.comparisons: int          = 0
        self.swaps:       int          = 0
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        # for auto-play timing
        self._last_tick:  float = 0.0

        # held by callers that share this run between threads
        self.lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: Iterable[Step]) -> None:
        """Drain a fresh algorithm generator and show its first step."""
        self.clear()
        self.steps = list(generator)
        if self.steps:
            self.state = StepperState.PAUSED
            self._goto(0)

    def reset(self) -> None:
        """Back to step 0 of the same trace, paused, counters cleared."""
        if not self.steps:
            return
        self.state = StepperState.PAUSED
        self._goto(0)

    def clear(self) -> None:
        """Drop the trace — caller must call start() again."""
        self.steps       = []
        self.current_idx = -1
        self.comparisons = 0
        self.swaps       = 0
        self.state       = StepperState.IDLE
        self._notify(None)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        target = self.current_idx + 1
        if target >= len(self.steps):
            if self.steps:
                self.state = StepperState.FINISHED
            return False
        self._goto(target)
        if target == len(self.steps) - 1 and self.state == StepperState.PLAYING:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if not 0 <= idx < len(self.steps):
            return False
        self._goto(idx)
        return True

    def jump_to_end(self) -> None:
        """Jump to the final step, counting everything in between."""
        if self.steps:
            self._goto(len(self.steps) - 1)
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.FINISHED, StepperState.IDLE):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Call periodically (e.g. every 10 ms).  If playing and enough
        time has elapsed, advances one step.  Returns True if a step
        was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic()
        if now - self._last_tick >= self.speed:
            self._last_tick = now
            return self.next_step()
        return False

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(0.001, seconds)

    def set_speed_slider(self, value: int) -> None:
        self.speed = slider_to_delay(value)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    def snapshot(self) -> Dict[str, Any]:
        """Run state for the UI (no step payload)."""
        return {
            "state":        self.state.value,
            "current_step": self.current_idx,
            "total_steps":  len(self.steps),
            "comparisons":  self.comparisons,
            "swaps":        self.swaps,
            "speed":        self.speed,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        if idx >= self.current_idx >= 0:
            counted = self.steps[self.current_idx + 1:idx + 1]
        else:
            self.comparisons = 0
            self.swaps       = 0
            counted = self.steps[1:idx + 1]

        for step in counted:
            if step.compared is not None:
                self.comparisons += len(step.compared)
            if step.swapped is not None:
                self.swaps += len(step.swapped)

        self.current_idx = idx
        self._notify(self.current_step)

    def _notify(self, step: Optional[Step]) -> None:
        if self.on_step and step is not None:
            self.on_step(step)
