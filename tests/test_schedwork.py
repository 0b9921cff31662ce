import pytest

from shiftword.schedwork import format_schedule, main, schedule

DEMO = [
    [1, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 0, 1],
]


def _assert_valid(avail, daily_need, max_shifts, sched):
    assert len(sched) == len(avail)
    counts = {}
    for day, workers in enumerate(sched):
        assert len(workers) == daily_need
        assert len(set(workers)) == daily_need
        for worker in workers:
            assert avail[day][worker]
            counts[worker] = counts.get(worker, 0) + 1
    assert all(count <= max_shifts for count in counts.values())


def test_empty_availability_has_no_schedule():
    assert schedule([], 1, 1) is None


def test_single_worker_single_day():
    assert schedule([[True]], 1, 1) == [[0]]


def test_demo_matrix_is_valid():
    sched = schedule(DEMO, 2, 2)
    assert sched is not None
    _assert_valid(DEMO, 2, 2, sched)


@pytest.mark.parametrize(
    "avail, need, shifts",
    [
        ([[1, 1, 1], [1, 1, 1], [1, 1, 1]], 2, 2),
        ([[1, 0, 1], [0, 1, 1], [1, 1, 0]], 1, 1),
        ([[1, 1], [1, 1], [1, 1], [1, 1]], 1, 2),
    ],
)
def test_solutions_satisfy_constraints(avail, need, shifts):
    sched = schedule(avail, need, shifts)
    assert sched is not None
    _assert_valid(avail, need, shifts, sched)


def test_shift_limit_makes_it_infeasible():
    assert schedule([[1, 0], [1, 0]], 1, 1) is None


def test_need_exceeds_workers():
    assert schedule([[1, 1]], 3, 5) is None


def test_unavailable_day():
    assert schedule([[1, 1], [0, 0]], 1, 2) is None


def test_zero_need_gives_empty_days():
    assert schedule([[True], [False]], 0, 0) == [[], []]


def test_lowest_ids_tried_first():
    assert schedule([[1, 1, 1]], 2, 1) == [[0, 1]]


def test_format_schedule():
    assert format_schedule([[0, 1], [2, 3]]) == "Day 0: 0 1 \nDay 1: 2 3 \n"


def test_format_empty_schedule():
    assert format_schedule([]) == ""


def test_main_prints_valid_schedule(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    sched = []
    for day, line in enumerate(lines):
        prefix = f"Day {day}: "
        assert line.startswith(prefix)
        sched.append([int(part) for part in line[len(prefix):].split()])
    _assert_valid(DEMO, 2, 2, sched)