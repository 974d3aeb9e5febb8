"""
engine/
-------
Playback, recording & input-array layer.

    from engine import Stepper, Recorder, compare, random_array
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS, slider_to_delay
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare
from engine.arrays   import random_array, parse_array, clamp_size

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "slider_to_delay",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "random_array",
    "parse_array",
    "clamp_size",
]
