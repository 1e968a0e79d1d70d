#!/usr/bin/env python3
"""
get-aeternity Installer Test Runner

Runs all tests (unit and mock/integration) or specific test types.

Usage:
    python run_tests.py           # Run all tests
    python run_tests.py --unit    # Run unit tests only
    python run_tests.py --mock    # Run mock/integration tests only
"""
import argparse
import os
import sys
import unittest

# Add the project root to Python path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def run_suite(subdir: str, title: str):
    print(f"Running {title}...")
    print("-" * 30)

    loader = unittest.TestLoader()
    suite = loader.discover(
        start_dir=os.path.join(os.path.dirname(__file__), subdir),
        pattern="test_*.py",
        top_level_dir=PROJECT_ROOT,
    )
    return unittest.TextTestRunner(verbosity=2).run(suite)


def main():
    """Main test runner."""
    parser = argparse.ArgumentParser(description="Run get-aeternity installer tests")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--unit", action="store_true", help="Run unit tests only")
    group.add_argument("--mock", action="store_true", help="Run mock/integration tests only")
    args = parser.parse_args()

    from get_aeternity.installer.utils.logger_utils import InstallerLogger

    # tests assert behavior, not log output
    InstallerLogger.set_console_output(False)

    results = []
    if not args.mock:
        results.append(run_suite("unit", "Unit Tests"))
    if not args.unit:
        results.append(run_suite("mock", "Mock/Integration Tests"))

    total_tests = sum(r.testsRun for r in results)
    total_failures = sum(len(r.failures) for r in results)
    total_errors = sum(len(r.errors) for r in results)

    print("\n" + "=" * 50)
    print(f"Total tests run: {total_tests}")
    print(f"Total failures: {total_failures}")
    print(f"Total errors: {total_errors}")

    return all(r.wasSuccessful() for r in results)


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
