from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..errors import InvalidParameter

# Safety cap to prevent pathological memory use from a tiny step over a long interval.
MAX_POINTS: int = 10_000_000


@dataclass(frozen=True)
class TimeGrid:
    t0: float
    dt: float
    n: int

    @property
    def t(self) -> np.ndarray:
        return self.t0 + self.dt * np.arange(self.n, dtype=float)

    @classmethod
    def from_interval(
        cls,
        init_time: float,
        fin_time: float,
        step: float,
        max_points: int = MAX_POINTS,
    ) -> "TimeGrid":
        """
        Uniform grid starting at init_time, with every point <= fin_time.

        Points are computed as t0 + i*dt rather than by repeated addition, so
        rounding does not accumulate over long intervals.
        """
        init_time = float(init_time)
        fin_time = float(fin_time)
        step = float(step)

        if not np.isfinite(step) or step <= 0:
            raise InvalidParameter(f"step must be a finite value > 0, got {step}")
        if not (np.isfinite(init_time) and np.isfinite(fin_time)):
            raise InvalidParameter(f"time bounds must be finite, got [{init_time}, {fin_time}]")
        if fin_time < init_time:
            raise InvalidParameter(f"fin_time ({fin_time}) must be >= init_time ({init_time})")

        if fin_time == init_time:
            return cls(t0=init_time, dt=step, n=1)

        # step must be resolvable at the largest time magnitude on the grid
        resolution = float(np.spacing(max(abs(init_time), abs(fin_time))))
        if step <= resolution:
            raise InvalidParameter(
                f"step {step} is below float resolution ({resolution}) on [{init_time}, {fin_time}]"
            )

        ratio = (fin_time - init_time) / step
        if not np.isfinite(ratio) or ratio + 1 > max_points:
            raise InvalidParameter(
                f"[{init_time}, {fin_time}] at step {step} needs ~{ratio + 1:.3g} samples, "
                f"more than max_points={max_points}"
            )

        n = int(np.floor(ratio)) + 1
        # floor() on the ratio can be off by one either way
        while init_time + n * step <= fin_time:
            n += 1
        while n > 1 and init_time + (n - 1) * step > fin_time:
            n -= 1
        return cls(t0=init_time, dt=step, n=n)


def generate_range(init_time: float, fin_time: float, step: float) -> np.ndarray:
    """Time points init_time, init_time + step, ... up to and including fin_time."""
    t = TimeGrid.from_interval(init_time, fin_time, step).t
    if t.size > 1 and not np.all(np.diff(t) > 0):
        raise InvalidParameter(f"step {step} does not give strictly increasing times from {init_time}")
    return t
