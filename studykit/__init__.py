"""Reference implementations of rate limiters, an LRU cache, stacks, concurrency patterns, an external sort and small puzzles."""

__version__ = "0.1.0"