"""The push_swap two-stack puzzle: input validation, stacks, operations and helpers."""

__version__ = "0.1.0"