"""Runnable demonstrations of processes, scheduling, threads and synchronisation."""

__version__ = "0.1.0"