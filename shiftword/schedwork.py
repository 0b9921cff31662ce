"""Backtracking search for a worker schedule meeting daily needs."""

from __future__ import annotations

import sys
from collections.abc import Sequence

__all__ = ["schedule", "format_schedule", "main"]

_DEMO_AVAILABILITY = [
    [True, True, True, True],
    [True, False, True, False],
    [True, True, False, True],
    [True, False, False, True],
]


def schedule(
    avail: Sequence[Sequence[bool]], daily_need: int, max_shifts: int
) -> list[list[int]] | None:
    """Assign *daily_need* distinct available workers to each day.

    ``avail[day][worker]`` tells whether a worker can work that day. No
    worker may be given more than *max_shifts* shifts. Returns one list of
    worker ids per day, or ``None`` when no such schedule exists.
    """
    if not avail:
        return None

    workers = range(len(avail[0]))
    shifts = [0] * len(avail[0])
    plan: list[list[int]] = [[] for _ in avail]

    def fill(day: int) -> bool:
        if day == len(avail):
            return True
        today = plan[day]
        if len(today) == daily_need:
            return fill(day + 1)
        for worker in workers:
            if not avail[day][worker] or shifts[worker] >= max_shifts:
                continue
            if worker in today:
                continue
            today.append(worker)
            shifts[worker] += 1
            if fill(day):
                return True
            today.pop()
            shifts[worker] -= 1
        return False

    return plan if fill(0) else None


def format_schedule(sched: Sequence[Sequence[int]]) -> str:
    """Render a schedule as one ``Day N: ...`` line per day."""
    return "".join(
        f"Day {day}: " + "".join(f"{worker} " for worker in workers) + "\n"
        for day, workers in enumerate(sched)
    )


def main(argv=None) -> int:
    """Solve the built-in example and print the schedule."""
    sched = schedule(_DEMO_AVAILABILITY, 2, 2)
    if sched is None:
        print("No solution found!")
    else:
        sys.stdout.write(format_schedule(sched))
    return 0


if __name__ == "__main__":
    sys.exit(main())