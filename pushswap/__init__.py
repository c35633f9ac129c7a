"""Sort integers on two stacks with a small instruction set, and check instruction sequences."""

__version__ = "1.0.0"