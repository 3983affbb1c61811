"""Programming-contest problems solved as plain functions, with a small command."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "text", "sequences", "queues", "cli"]