"""Interactive command-line front end for the simulations."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence

from ossim import ipc, prodcons
from ossim.bankers import (
    BankersState,
    ExceededNeedError,
    ResourcesUnavailableError,
    UnsafeStateError,
)
from ossim.memory import best_fit, first_fit, format_allocations, worst_fit
from ossim.scheduling import (
    Process,
    fcfs,
    format_round_robin,
    format_table,
    priority_scheduling,
    round_robin,
    sjf,
)

_SCHEDULERS = {
    "fcfs": (
        fcfs,
        "First Come First Serve (FCFS) Scheduling Algorithm",
        "===========================================",
    ),
    "sjf": (
        sjf,
        "Shortest Job First (SJF) Scheduling Algorithm",
        "===========================================",
    ),
    "priority": (
        priority_scheduling,
        "Priority Scheduling Algorithm",
        "============================",
    ),
}

_ALLOCATORS = {
    "first-fit": (first_fit, "First-Fit"),
    "best-fit": (best_fit, "Best-Fit"),
    "worst-fit": (worst_fit, "Worst-Fit"),
}


class _InputError(Exception):
    """The input ended early or held something other than an integer."""


class _Reader:
    """Reads whitespace-separated integers from standard input, prompting first."""

    def __init__(self) -> None:
        self._tokens: Iterator[str] = (
            token for line in sys.stdin for token in line.split()
        )

    def read_int(self, prompt: str = "") -> int:
        if prompt:
            print(prompt, end="", flush=True)
        try:
            token = next(self._tokens)
        except StopIteration:
            raise _InputError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"expected an integer, got {token!r}") from None

    def read_row(self, width: int) -> list[int]:
        return [self.read_int() for _ in range(width)]


def _schedule(command: str, reader: _Reader) -> int:
    algorithm, title, underline = _SCHEDULERS[command]
    with_priority = command == "priority"
    count = reader.read_int("Enter the number of processes: ")
    print("\nEnter process details:")
    processes = []
    for pid in range(1, count + 1):
        print(f"\nProcess {pid}:")
        arrival = reader.read_int("Enter arrival time: ")
        burst = reader.read_int("Enter burst time: ")
        priority = (
            reader.read_int("Enter priority (lower value means higher priority): ")
            if with_priority
            else 0
        )
        processes.append(Process(pid, arrival, burst, priority))
    results = algorithm(processes)
    print(f"\n{title}")
    print(underline)
    print("\n" + format_table(results, show_priority=with_priority))
    return 0


def _round_robin(reader: _Reader) -> int:
    count = reader.read_int("Enter number of processes: ")
    processes = []
    for pid in range(1, count + 1):
        print(f"Enter arrival time and burst time for process {pid}: ", end="", flush=True)
        processes.append(Process(pid, reader.read_int(), reader.read_int()))
    quantum = reader.read_int("Enter time quantum: ")
    print("\n" + format_round_robin(round_robin(processes, quantum)), end="")
    return 0


def _allocate(command: str, reader: _Reader) -> int:
    strategy, title = _ALLOCATORS[command]
    block_count = reader.read_int("Enter the number of memory blocks: ")
    blocks = [reader.read_int(f"Block {n} size: ") for n in range(1, block_count + 1)]
    process_count = reader.read_int("Enter the number of processes: ")
    sizes = [reader.read_int(f"Process {n} size: ") for n in range(1, process_count + 1)]
    print("\n" + format_allocations(title, strategy(blocks, sizes)), end="")
    return 0


def _print_sequence(sequence: Sequence[int]) -> None:
    print("Safe sequence: " + "".join(f"{pid} " for pid in sequence))


def _read_process_id(reader: _Reader, processes: int) -> int:
    while True:
        pid = reader.read_int(f"Enter process ID (0-{processes - 1}) making the request: ")
        if 0 <= pid < processes:
            return pid
        print(f"Invalid process ID. Please enter a value between 0 and {processes - 1}.")


def _bankers(reader: _Reader, processes: int, resources: int, show_state: bool) -> int:
    print("Enter available resources (separated by space):")
    available = reader.read_row(resources)
    maximum = []
    for pid in range(processes):
        print(f"Enter maximum resources for Process {pid} (separated by space):")
        maximum.append(reader.read_row(resources))
    allocation = []
    for pid in range(processes):
        print(f"Enter allocated resources for Process {pid} (separated by space):")
        allocation.append(reader.read_row(resources))

    state = BankersState(available, maximum, allocation)
    sequence = state.safe_sequence()
    if sequence is None:
        print("Error: Initial system state is not safe.")
        return 1
    _print_sequence(sequence)
    if show_state:
        print("\n" + state.format_state())

    requests = reader.read_int("Enter the number of processes making requests: ")
    for _ in range(requests):
        pid = _read_process_id(reader, processes)
        print(f"Enter the requested resources for Process {pid} (separated by space):")
        request = reader.read_row(resources)
        try:
            sequence = state.request(pid, request)
        except ExceededNeedError as exc:
            print(f"Error: Process {pid} has exceeded its remaining need.")
            print(f"Request: {exc.requested}, Need: {exc.need} for resource {exc.resource}")
        except ResourcesUnavailableError:
            print(f"Error: Resources not available for Process {pid}.")
        except UnsafeStateError as exc:
            print(exc)
        else:
            _print_sequence(sequence)
            print(f"Request granted for Process {pid}.")
        if show_state:
            print("\n" + state.format_state())
    return 0


def _ipc_write(args: argparse.Namespace) -> int:
    ipc.write_message(ipc.build_message(args.words), args.name, args.size)
    print("data written to shared memory ")
    return 0


def _ipc_read(args: argparse.Namespace) -> int:
    try:
        message = ipc.read_message(args.name, unlink=not args.keep)
    except FileNotFoundError as exc:
        print(f"shmget: {exc}", file=sys.stderr)
        return 1
    print(f"Message read from shared memory: {message}")
    return 0


def _prodcons(args: argparse.Namespace) -> int:
    try:
        prodcons.run(args.count, args.seed, args.producer_sleep, args.consumer_sleep)
    except KeyboardInterrupt:
        return 130
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ossim", description="Operating-system algorithm simulations."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name in _SCHEDULERS:
        sub.add_parser(name, help=f"{name} CPU scheduling")
    sub.add_parser("rr", help="round robin CPU scheduling")
    for name in _ALLOCATORS:
        sub.add_parser(name, help=f"{name} memory allocation")

    bankers = sub.add_parser("bankers", help="banker's algorithm")
    bankers.add_argument("--processes", type=int, default=5)
    bankers.add_argument("--resources", type=int, default=3)
    bankers.add_argument("--show-state", action="store_true")

    writer = sub.add_parser("ipc-write", help="write a message to shared memory")
    writer.add_argument("words", nargs="*")
    writer.add_argument("--name", default=ipc.DEFAULT_NAME)
    writer.add_argument("--size", type=int, default=ipc.DEFAULT_SIZE)

    reader = sub.add_parser("ipc-read", help="read a message from shared memory")
    reader.add_argument("--name", default=ipc.DEFAULT_NAME)
    reader.add_argument("--keep", action="store_true", help="do not remove the segment")

    pc = sub.add_parser("prodcons", help="producer-consumer simulation")
    pc.add_argument("--count", type=int, default=None, help="items to pass (default: forever)")
    pc.add_argument("--seed", type=int, default=None)
    pc.add_argument("--producer-sleep", type=int, default=20)
    pc.add_argument("--consumer-sleep", type=int, default=2)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv``; return the exit status."""
    args = _parser().parse_args(argv)
    command = args.command
    try:
        if command in _SCHEDULERS:
            return _schedule(command, _Reader())
        if command == "rr":
            return _round_robin(_Reader())
        if command in _ALLOCATORS:
            return _allocate(command, _Reader())
        if command == "bankers":
            return _bankers(_Reader(), args.processes, args.resources, args.show_state)
        if command == "ipc-write":
            return _ipc_write(args)
        if command == "ipc-read":
            return _ipc_read(args)
        return _prodcons(args)
    except (_InputError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())