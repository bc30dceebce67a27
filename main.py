"""Main entry point for the keyword benchmark."""
from __future__ import annotations

from evaluation.run_evaluation import main as run_benchmark


def main() -> int:
    """Run the benchmark with arguments from the command line."""
    return run_benchmark()


__all__ = ["main"]

if __name__ == "__main__":
    raise SystemExit(main())
