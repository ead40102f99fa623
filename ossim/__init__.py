"""Simulations of classic operating-system algorithms: scheduling, memory
allocation, the banker's algorithm, shared-memory messaging and a
producer/consumer buffer, with an ``ossim`` command-line front end."""

__version__ = "0.1.0"
__all__ = ["bankers", "cli", "ipc", "memory", "prodcons", "scheduling"]