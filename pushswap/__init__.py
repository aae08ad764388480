"""Sort integers with two stacks and the push_swap operation set."""

__version__ = "0.1.0"