"""Robust I/O and socket helpers, a CGI adder, and a job-control shell with its test programs."""

__version__ = "0.1.0"