"""Frame timing and window settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

FPS_INTERVAL = 0.5


@dataclass
class FrameClock:
    """Tracks frame deltas and reports the frame rate twice a second."""

    last_time: float = 0.0
    dt: float = 0.0
    frame_count: int = 0
    frame_time: float = 0.0
    current_time: float = 0.0

    def tick(self, elapsed_ms: float) -> Optional[float]:
        """Advance to the given elapsed time in milliseconds.

        Returns the frames per second when a report is due, otherwise None.
        """
        self.dt = 0.001 * (elapsed_ms - self.last_time)
        self.last_time = elapsed_ms
        self.frame_count += 1
        self.frame_time += self.dt
        fps = None
        if self.frame_time >= FPS_INTERVAL:
            fps = self.frame_count / self.frame_time
            self.frame_count = 0
            self.frame_time = 0.0
        self.current_time += self.dt
        return fps


@dataclass
class WindowSettings:
    """Name and size of the simulator window."""

    name: str = "Planet Simulator"
    width: int = 1600
    height: int = 800

    def title(self, fps: float) -> str:
        """Window title showing the frame rate."""
        return f"{self.name} [fps={int(fps)}]"