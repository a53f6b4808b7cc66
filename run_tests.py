"""Run the configenv test suite.

Usage:
    python run_tests.py            # plain run
    python run_tests.py --coverage # with coverage report for the configenv package
"""
import subprocess
import sys


def _pytest(extra_args):
    cmd = [sys.executable, "-m", "pytest", "tests/", "-v", "--tb=short", *extra_args]
    try:
        return subprocess.run(cmd, check=False).returncode
    except FileNotFoundError:
        print("ERROR: pytest not found. Install it with: pip install -e .[test]")
        return 1


def run_tests():
    """Run all tests with pytest."""
    print("=" * 70)
    print("Running configenv Tests")
    print("=" * 70)
    return _pytest(["--color=yes"])


def run_tests_with_coverage():
    """Run tests with coverage reporting."""
    print("=" * 70)
    print("Running Tests with Coverage Report")
    print("=" * 70)
    code = _pytest(["--cov=configenv", "--cov-report=term-missing", "--cov-report=html"])
    if code == 0:
        print("Coverage report generated in htmlcov/index.html")
    return code


if __name__ == "__main__":
    if "--coverage" in sys.argv or "-c" in sys.argv:
        exit_code = run_tests_with_coverage()
    else:
        exit_code = run_tests()

    sys.exit(exit_code)
