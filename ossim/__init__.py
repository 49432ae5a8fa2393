"""Simulations of CPU and disk scheduling, page replacement, memory fits,
the banker's algorithm, readers-writers and small file tools."""

__version__ = "0.1.0"

__all__ = [
    "bankers",
    "cpu_scheduling",
    "disk_scheduling",
    "file_tools",
    "memory_fit",
    "page_replacement",
    "readers_writers",
]