"""Test runner for the keyword benchmark toolkit.

Usage:
    python run_tests.py             # run the suite
    python run_tests.py --coverage  # run with coverage for the library packages
"""
import sys
import subprocess

PACKAGES = ["normalizer", "correction", "evaluation", "config", "core", "logger"]


def _pytest(extra_args):
    cmd = [sys.executable, "-m", "pytest", "tests/", "-v", "--tb=short", *extra_args]
    try:
        return subprocess.run(cmd, check=False).returncode
    except FileNotFoundError:
        print("ERROR: pytest not found. Install it with: pip install -e .[test]")
        return 1


def run_tests():
    print("=" * 70)
    print("Running Keyword Benchmark Tests")
    print("=" * 70)
    print()
    return _pytest(["--color=yes"])


def run_tests_with_coverage():
    print("=" * 70)
    print("Running Tests with Coverage Report")
    print("=" * 70)
    print()
    cov_args = [f"--cov={name}" for name in PACKAGES]
    code = _pytest(cov_args + ["--cov-report=term-missing", "--cov-report=html"])
    if code == 0:
        print()
        print("Coverage report generated in htmlcov/index.html")
    return code


if __name__ == "__main__":
    if "--coverage" in sys.argv or "-c" in sys.argv:
        exit_code = run_tests_with_coverage()
    else:
        exit_code = run_tests()

    sys.exit(exit_code)
