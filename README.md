# ossim

Small simulations of classic operating-system algorithms. You can use them
as a library or from the `ossim` command.

## What is included

### CPU scheduling: `ossim.scheduling`

- `Process(pid, arrival_time, burst_time, priority=0)` describes one job.
  A lower `priority` value means a higher priority.
- `fcfs`, `sjf` and `priority_scheduling` are non-preemptive schedulers.
  Each one runs the ready process with the earliest arrival, the shortest
  burst or the lowest priority value. Ties go to the process that was
  listed first.
- `round_robin(processes, time_quantum)` visits the ready processes in input
  order on every pass. It raises `ValueError` if the quantum is not
  positive or if a burst time is negative.
- Every scheduler returns one `ProcessResult` per process, in input order.
  A result has `completion_time`, `turnaround_time` and `waiting_time`.
  `start_time` is set by the non-preemptive schedulers and is `None` for
  round robin.
- `average_waiting_time` and `average_turnaround_time` compute the means.
  They raise `ValueError` when given no results.
- `format_table(results, show_priority=False)` renders a boxed table
  followed by the averages. `format_round_robin(results)` renders
  tab-separated columns.

```python
from ossim.scheduling import Process, sjf, format_table

procs = [Process(1, 0, 8), Process(2, 1, 4), Process(3, 2, 2)]
print(format_table(sjf(procs)))
```

### Contiguous memory allocation: `ossim.memory`

`first_fit`, `best_fit` and `worst_fit` each take a list of block sizes and
a list of process sizes. They return one `Allocation` per process, holding
`process_size`, `block_size` and `remaining_block_size`. If a process could
not be placed, both block fields are `None` and `allocated` is false. A
block can hold several processes. Each placement reduces the space left in
that block.

- Best fit only considers blocks with fewer than 9999 units left.
- Worst fit skips blocks that have no space left.

`format_allocations(title, allocations)` renders the result table. It shows
`N/A` for processes that were not placed.

```python
from ossim.memory import first_fit, best_fit, format_allocations

blocks = [100, 500, 200, 300, 600]
processes = [212, 417, 112, 426]

print(format_allocations("First-Fit", first_fit(blocks, processes)))
print(format_allocations("Best-Fit", best_fit(blocks, processes)))
```

### Deadlock avoidance: `ossim.bankers`

`BankersState(available, maximum, allocation)` holds the current resource
state. Its methods are:

- `need()` returns maximum minus allocation for each process.
- `safe_sequence()` returns an order in which every process can finish, or
  `None` if there is no such order.
- `is_safe()` reports whether a safe sequence exists.
- `format_state()` renders the allocation, maximum, need and available
  tables.
- `request(process_id, request)` grants a request and returns the new safe
  sequence.

A request is refused in these cases:

- It raises `ExceededNeedError` if the request exceeds the process's
  remaining need.
- It raises `ResourcesUnavailableError` if the request exceeds what is
  available.
- It raises `UnsafeStateError` if granting the request would leave no safe
  sequence. The state is rolled back first.

All three are subclasses of `BankersError`. A process id out of range, or a
request of the wrong length, raises `ValueError`.

### Shared-memory messaging: `ossim.ipc`

- `build_message(args)` composes the greeting text from a list of words.
- `write_message(message, name="shmfile", size=1024)` stores the text in a
  named shared-memory segment and creates the segment if needed. The segment
  stays in place after the writer exits.
- `read_message(name="shmfile", unlink=True)` returns the text. It removes
  the segment unless `unlink` is false, and raises `FileNotFoundError` if
  no segment has that name.

### Producer/consumer: `ossim.prodcons`

- `BoundedBuffer(capacity=5)` is a FIFO buffer guarded by semaphores.
  `put` blocks while the buffer is full and `get` blocks while it is empty.
- `producer` puts random items between 0 and 99 into the buffer, and
  `consumer` takes them out. Each prints `Produced: n` or `Consumed: n` and
  sleeps a random number of seconds below its `max_sleep`.
- `run(count, seed, max_producer_sleep, max_consumer_sleep, out)` runs one
  producer thread and one consumer thread and returns `(produced, consumed)`.
  When `count` is `None`, both threads run forever.

## Installation

```
pip install .
```

Only the Python standard library is needed. To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
ossim --help
```

The subcommands are:

- `fcfs`, `sjf`, `priority`, `rr`: scheduling.
- `first-fit`, `best-fit`, `worst-fit`: memory allocation.
- `bankers`: the banker's algorithm.
- `ipc-write`, `ipc-read`: shared-memory messaging.
- `prodcons`: the producer/consumer simulation.

The scheduling, allocation and `bankers` commands prompt for integers and
read them from standard input, so you can also pipe the input in. For
example, three processes, each given as an arrival time and a burst time,
followed by a quantum of 2:

```
printf '3\n0 5\n1 3\n2 1\n2\n' | ossim rr
```

`bankers` has these options:

- `--processes` sets the number of processes (default 5).
- `--resources` sets the number of resources (default 3).
- `--show-state` prints the state tables after each step.

It exits with status 1 if the initial state is not safe.

The messaging commands take these options:

```
ossim ipc-write hello world     # --name, --size
ossim ipc-read                  # --name, --keep leaves the segment in place
```

`ipc-read` exits with status 1 if the segment does not exist.

`prodcons` runs until interrupted, unless you give it `--count`. Its options
are:

- `--count` sets how many items to pass.
- `--seed` seeds the random source.
- `--producer-sleep` and `--consumer-sleep` set the upper bounds for the
  random sleeps.

```
ossim prodcons --count 10 --seed 1 --producer-sleep 2
```

## Limitations

- The simulations work on the numbers you give them. They do not inspect
  or control real processes or memory.
- The interactive commands stop with an error on input that is not an
  integer.