"""String sorting algorithms with character-comparison counting, and a benchmark harness."""

__version__ = "0.1.0"
__all__ = ["counter", "sorts", "generator", "tester", "cli"]