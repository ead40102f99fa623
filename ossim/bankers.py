"""The banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from dataclasses import dataclass


class BankersError(Exception):
    """A resource request could not be granted."""

    def __init__(self, message: str, process_id: int) -> None:
        super().__init__(message)
        self.process_id = process_id


class ExceededNeedError(BankersError):
    """The request asks for more than the process still needs."""

    def __init__(self, process_id: int, resource: int, requested: int, need: int) -> None:
        super().__init__(
            f"Process {process_id} has exceeded its remaining need. "
            f"Request: {requested}, Need: {need} for resource {resource}",
            process_id,
        )
        self.resource = resource
        self.requested = requested
        self.need = need


class ResourcesUnavailableError(BankersError):
    """The request asks for more than is currently available."""

    def __init__(self, process_id: int) -> None:
        super().__init__(f"Resources not available for Process {process_id}.", process_id)


class UnsafeStateError(BankersError):
    """Granting the request would leave the system in an unsafe state."""

    def __init__(self, process_id: int) -> None:
        super().__init__(
            f"Request denied for Process {process_id}. "
            "System would be in an unsafe state.",
            process_id,
        )


@dataclass
class BankersState:
    """Available resources plus the maximum and allocated matrices per process."""

    available: list[int]
    maximum: list[list[int]]
    allocation: list[list[int]]

    def __post_init__(self) -> None:
        self.available = list(self.available)
        self.maximum = [list(row) for row in self.maximum]
        self.allocation = [list(row) for row in self.allocation]
        width = len(self.available)
        if len(self.maximum) != len(self.allocation):
            raise ValueError("maximum and allocation must list the same processes")
        if any(len(row) != width for row in self.maximum + self.allocation):
            raise ValueError("every row must have one entry per resource")

    @property
    def process_count(self) -> int:
        return len(self.maximum)

    def need(self) -> list[list[int]]:
        """What each process may still request: maximum minus allocation."""
        return [
            [m - a for m, a in zip(max_row, alloc_row)]
            for max_row, alloc_row in zip(self.maximum, self.allocation)
        ]

    def safe_sequence(self) -> list[int] | None:
        """An order in which every process can finish, or None if there is none."""
        work = list(self.available)
        need = self.need()
        finished = [False] * self.process_count
        sequence: list[int] = []
        progress = True
        while progress and len(sequence) < self.process_count:
            progress = False
            for pid, (row, alloc) in enumerate(zip(need, self.allocation)):
                if finished[pid] or any(n > w for n, w in zip(row, work)):
                    continue
                work = [w + a for w, a in zip(work, alloc)]
                sequence.append(pid)
                finished[pid] = True
                progress = True
        return sequence if len(sequence) == self.process_count else None

    def is_safe(self) -> bool:
        return self.safe_sequence() is not None

    def request(self, process_id: int, request: list[int]) -> list[int]:
        """Grant a request if it keeps the system safe; return the new safe sequence."""
        if not 0 <= process_id < self.process_count:
            raise ValueError(
                f"Invalid process ID. Please enter a value between 0 and "
                f"{self.process_count - 1}."
            )
        request = list(request)
        if len(request) != len(self.available):
            raise ValueError("request must have one entry per resource")

        need = self.need()[process_id]
        for resource, (wanted, needed) in enumerate(zip(request, need)):
            if wanted > needed:
                raise ExceededNeedError(process_id, resource, wanted, needed)
        if any(r > a for r, a in zip(request, self.available)):
            raise ResourcesUnavailableError(process_id)

        previous_available = self.available
        previous_row = self.allocation[process_id]
        self.available = [a - r for a, r in zip(previous_available, request)]
        self.allocation[process_id] = [a + r for a, r in zip(previous_row, request)]

        sequence = self.safe_sequence()
        if sequence is None:
            self.available = previous_available
            self.allocation[process_id] = previous_row
            raise UnsafeStateError(process_id)
        return sequence

    def format_state(self) -> str:
        """Render the allocation, maximum, need and available tables."""

        def cells(values: list[int]) -> str:
            return "".join(f"{v} " for v in values)

        lines = ["Current System State:", "Process\tAllocation\tMax\tNeed\tAvailable"]
        for pid, (alloc, maximum, need) in enumerate(
            zip(self.allocation, self.maximum, self.need())
        ):
            line = f"P{pid}\t{cells(alloc)}\t\t{cells(maximum)}\t{cells(need)}"
            if pid == 0:
                line += f"\t{cells(self.available)}"
            lines.append(line)
        return "\n".join(lines) + "\n"