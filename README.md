# pqbench

pqbench provides three priority queues, each built on a different data
structure. It also includes a benchmark that times their operations on inputs of
growing size.

All three queues share one interface. Each entry pairs an integer priority with
an integer value. The entry with the lowest priority number comes out first.

| Class | Module | Storage |
|-------|--------|---------|
| `LinkedListQueue` | `pqbench.linked_list` | A singly linked list kept sorted by priority. Nodes are recycled through a `NodePool`. |
| `DynamicArrayQueue` | `pqbench.dynamic_array` | A list kept sorted by priority. |
| `BinaryHeap` | `pqbench.binary_heap` | An array-backed binary min-heap. |

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Using the queues

```python
from pqbench.binary_heap import BinaryHeap
from pqbench.linked_list import LinkedListQueue
from pqbench.dynamic_array import DynamicArrayQueue

queue = LinkedListQueue()
queue.push(5, 50)
queue.push(1, 10)
queue.push(3, 30)

queue.peek()                 # 10, the value with the lowest priority
queue.modify_priority(5, 0)  # the entry with priority 5 now has priority 0
queue.pop()                  # 50
len(queue)                   # 2
list(queue)                  # [(1, 10), (3, 30)]
queue.is_empty()             # False
```

Each queue supports these operations:

- `push(priority, value)` adds an entry.
- `pop()` removes the entry with the lowest priority and returns its value.
- `peek()` returns that value without removing the entry.
- `modify_priority(old_priority, new_priority)` finds the first entry with
  `old_priority`, gives it `new_priority` and moves it to its new place.
- `is_empty()` and `len()` report the size of the queue.
- Iterating over a queue yields `(priority, value)` pairs in storage order.
  - The list and the array yield them in sorted order.
  - The heap yields them in heap array order.

### Errors

Calling `pop()` or `peek()` on an empty queue raises `IndexError`.

`modify_priority` behaves differently in each queue:

| Queue | Empty queue | No entry has `old_priority` | Which entry it changes |
|-------|-------------|-----------------------------|------------------------|
| `LinkedListQueue` | Raises `IndexError` | Raises `KeyError` | The first in sorted order |
| `DynamicArrayQueue` | Raises `KeyError` | Raises `KeyError` | The first in sorted order |
| `BinaryHeap` | Does nothing | Does nothing | The first in heap array order |

### Equal priorities

`LinkedListQueue` and `DynamicArrayQueue` keep entries of equal priority in the
order they were added. They remove those entries in the same order. `BinaryHeap`
makes no such promise.

### The node pool

`LinkedListQueue` starts with a pool of 10,000 spare nodes by default. Pass a
different number with `LinkedListQueue(pool_size=...)`.

`NodePool` can also be used on its own:

- `get_node(priority, value)` takes a node from the pool. It creates a new node
  when the pool is empty.
- `return_node(node)` puts a node back into the pool.
- `len(pool)` gives the number of spare nodes.

## Running the benchmark

```
pqbench
```

The benchmark runs two kinds of measurement on every queue, one data size at a
time.

**Random data.** Each queue is filled with random priorities and values. The
benchmark then reports the average time of `push`, `pop`, `modify_priority` and
`peek`.

**Best, average and worst cases.** Each queue is filled with the sorted pairs
`(0, 0)` to `(n - 1, n - 1)`. The benchmark then times `modify_priority` and
`push` on entries chosen to fall at the front, the middle and the end of the
order.

Every figure is an average over the repetitions, given in whole nanoseconds. An
operation that fails during timing still counts as one timed run. Examples are a
`pop` on an empty queue and a `modify_priority` for a priority that is not
present.

### Options

| Option | Default | Meaning |
|--------|---------|---------|
| `--sizes N [N ...]` | `100 500 1000 5000 10000 50000 100000 500000 1000000` | Data sizes to test |
| `--reps N` | `100` | Repetitions of each timed operation |
| `--seed N` | none (unseeded) | Seed for the random data |
| `--results PATH` | `wyniki.txt` | Report file for the random-data run |
| `--cases PATH` | `przypadki.txt` | Report file for the best, average and worst cases |

If a report file cannot be opened, the command prints a message to standard
error and exits with status 1.

The full run over the largest sizes takes a long time. The linked list and the
array do linear work for each insertion. For a quick run, pass smaller values:

```
pqbench --sizes 100 1000 --reps 10 --seed 1
```

### Report format

```
Testing structure: BinaryHeap
Number of elements: 100
Average push time: 812 ns
Average pop time: 1093 ns
...
```

In the cases report, the `modify_priority` timings and the `push` timings for
each size are followed by a blank line.

### Driving the benchmark from Python

All of the following live in `pqbench.benchmark`.

**Preparing a queue**

- `fill_structure(structure, data_size, rng)` pushes `data_size` random pairs.
  It draws them from a `random.Random`.
- `fill_sorted_structure(structure, data_size)` pushes the sorted pairs.
- `clear_structure(structure)` pops entries until the queue is empty.

**Measuring**

- `measure_random(structure, sizes, reps, rng)` returns one `SizeResult` per
  size.
- `measure_cases(name, structure, sizes, reps)` does the same for the best,
  average and worst cases. `name` must be `"LinkedListQueue"`,
  `"DynamicArrayQueue"` or `"BinaryHeap"`. Any other name raises `ValueError`.

Each `SizeResult` has these members:

- `size`
- `groups`, a list of dicts that map an operation label to nanoseconds
- `timings`, all groups merged into one dict

**Reporting**

- `format_results(name, results)` renders the results as report text.
- `main(argv=None)` runs the whole benchmark and returns the exit status.