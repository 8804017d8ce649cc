"""
Simulation clock.

Separates real frame time from simulation time. Pausing sets the time
scale to zero: gameplay systems receive a zero delta while menus and the
tick scheduler keep running on real frames.
"""

from __future__ import annotations


class GameClock:
    """
    Scaled simulation clock.

    Attributes:
        time_scale: Multiplier applied to real frame time (0 freezes)
        frame: Number of frames advanced so far
        elapsed: Total scaled simulation time in seconds
        real_elapsed: Total unscaled time in seconds
    """

    def __init__(self, time_scale: float = 1.0):
        self.time_scale = time_scale
        self.frame = 0
        self.elapsed = 0.0
        self.real_elapsed = 0.0
        self._scale_before_pause = time_scale if time_scale > 0 else 1.0

    @property
    def paused(self) -> bool:
        """True while the simulation is frozen."""
        return self.time_scale == 0

    def pause(self) -> None:
        """Freeze the simulation, remembering the current scale."""
        if not self.paused:
            self._scale_before_pause = self.time_scale
        self.time_scale = 0.0

    def resume(self) -> None:
        """Unfreeze the simulation at the scale it had before pausing."""
        if self.paused:
            self.time_scale = self._scale_before_pause

    def advance(self, real_dt: float) -> float:
        """
        Advance one frame.

        Args:
            real_dt: Real seconds since the previous frame

        Returns:
            Scaled delta time for simulation systems
        """
        dt = real_dt * self.time_scale
        self.frame += 1
        self.real_elapsed += real_dt
        self.elapsed += dt
        return dt
