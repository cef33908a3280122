"""Explicit Euler integration of ordinary differential equations."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from numlab.matrix import Matrix
from numlab.numerics import zeros

ODE = Callable[[float, Matrix], Matrix]


@dataclass
class ODEResult:
    """Solution values ``y`` (one row per step), times ``t`` and optional iteration counts."""

    y: Matrix
    t: Matrix
    iterations: Matrix | None = None


def explicit_euler(fun: ODE, t_interval: Sequence[float], y0: Matrix, h: float = 0.0) -> ODEResult:
    """Approximate ``y' = fun(t, y)`` over ``t_interval`` starting at row vector ``y0``.

    A step width ``h`` of 0 divides the interval into 1000 steps.
    """
    if not t_interval:
        raise ValueError("time interval must not be empty")
    start, end = t_interval[0], t_interval[-1]
    if h == 0:
        h = (end - start) / 1000
    if h == 0:
        raise ValueError("time interval has zero length")
    steps = int((end - start) / h + 1)
    if steps < 1:
        raise ValueError("step width does not match the direction of the interval")

    elem_size = y0.columns
    t = Matrix(0.0, steps, 1, 1)
    y = zeros(steps, elem_size)
    t[0, 0] = start
    for j in range(elem_size):
        y[0, j] = y0[0, j]

    for i in range(1, steps):
        cur_t = t[i - 1, 0]
        cur_y = y.row(i - 1)
        y_next = cur_y + fun(cur_t, cur_y) * h
        y.set_row(i, y_next.get_slice(0, 0, 0, elem_size - 1))
        t[i, 0] = cur_t + h
    return ODEResult(y, t)