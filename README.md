# shiftword

Two small backtracking solvers:

- **Wordle helper**: lists every dictionary word that fits a pattern of fixed
  letters and blanks and that uses a given set of "floating" letters.
- **Shift scheduler**: assigns a fixed number of distinct workers to each day.
  Each worker is assigned only on days they are available, and no worker goes
  over a maximum number of shifts.

## Installation

```
pip install .
```

## Wordle helper

### Command line

```
shiftword-wordle s---ng
shiftword-wordle -i--- dn
```

The first argument is the pattern. Known letters stay in place and `-` marks
each unknown position. The optional second argument lists letters that must
each be used to fill one of the blanks. Matching words are printed one per
line in sorted order.

If the command is run without a pattern, it prints a usage hint and exits with
status 1.

The command reads its word list from the file `dict-eng.txt` in the current
directory. The package does not ship this file, so you must supply it yourself.
The file holds whitespace-separated words. When the file is loaded:

- Words that start with an upper-case letter are skipped.
- Words that contain anything other than ASCII letters are skipped.
- The number of accepted words is reported on standard error, as
  `Read N words into dictionary.`

### From Python

```python
from shiftword.dictionary import read_dict_words
from shiftword.wordle import wordle

words = read_dict_words("dict-eng.txt")   # a frozenset of str
print(sorted(wordle("-i---", "dn", words)))
```

`read_dict_words` raises `OSError("Cannot open dictionary file.")` if the file
cannot be opened.

`wordle(pattern, floating, dictionary)` works with any container of words that
supports `in`, so a plain set works too. It returns a `set`:

```python
wordle("-a-", "t", {"cat", "bat", "car"})   # {"cat", "bat"}
```

Each blank is filled with a lower-case letter from `a` to `z`, and the result
is then checked against the dictionary. The search therefore grows quickly with
the number of blanks.

## Shift scheduler

### Command line

```
shiftword-schedule
```

This runs the scheduler on a built-in example: four days, four workers, two
workers needed per day and at most two shifts per worker. It prints one line
per day, such as `Day 0: 0 1 `. If no schedule exists, it prints
`No solution found!` instead.

The command has no options. To schedule your own data, call the scheduler from
Python as shown below.

### From Python

Pass three things to `schedule`:

- an availability matrix, with one row per day and one column per worker;
- the number of workers needed each day;
- the maximum number of shifts per worker.

```python
from shiftword.schedwork import schedule, format_schedule

avail = [
    [True, True, True, True],
    [True, False, True, False],
    [True, True, False, True],
    [True, False, False, True],
]
plan = schedule(avail, 2, 2)
if plan is None:
    print("No solution found!")
else:
    print(format_schedule(plan), end="")
```

`schedule` returns one list of worker IDs per day, where a worker ID is the
worker's column index. It returns `None` if no valid schedule exists or if the
availability matrix is empty. The search returns the first schedule it finds,
trying workers in ID order.

`format_schedule` renders a schedule as text, with one line per day in the
form `Day N: id id `.

## Running the tests

```
pip install .[test]
pytest
```