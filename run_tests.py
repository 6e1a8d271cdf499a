#!/usr/bin/env python3
"""
Test runner script for the snookerlive score board

This script provides various testing options:
- Run all tests
- Run specific test categories (unit, integration)
- Run with coverage reporting
- Run tests matching patterns

Usage:
    python run_tests.py              # Run all tests
    python run_tests.py --unit       # Run only unit tests
    python run_tests.py --coverage   # Run with coverage report
    python run_tests.py --fast       # Skip slow tests
    python run_tests.py --pattern extractor  # Run tests matching pattern
"""

import argparse
import subprocess
import sys
from pathlib import Path


def run_command(cmd, description=""):
    """Run a command and handle output"""
    print(f"\n{'='*60}")
    if description:
        print(f"🚀 {description}")
    print(f"📝 Running: {' '.join(cmd)}")
    print(f"{'='*60}")

    try:
        result = subprocess.run(cmd, check=False, capture_output=False)
        if result.returncode == 0:
            print(f"✅ {description or 'Command'} completed successfully")
        else:
            print(
                f"❌ {description or 'Command'} failed with exit code {result.returncode}"
            )
        return result.returncode
    except FileNotFoundError:
        print(f"❌ Command not found: {cmd[0]}")
        return 127


def install_dependencies():
    """Install the package with its test extra"""
    print("📦 Installing test dependencies...")
    return run_command(
        [sys.executable, "-m", "pip", "install", "-e", ".[test]"],
        "Installing dependencies",
    )


def run_tests(args):
    """Run tests based on provided arguments"""
    cmd = [sys.executable, "-m", "pytest", "-v"]

    markers = []
    if args.unit:
        markers.append("unit")
        description = "Unit tests"
    elif args.integration:
        markers.append("integration")
        description = "Integration tests"
    else:
        description = "All tests"

    if args.fast:
        markers.append("not slow")
        description += " (fast only)"

    if markers:
        cmd.extend(["-m", " and ".join(markers)])

    if args.coverage:
        cmd.extend(["--cov=snookerlive", "--cov-report=html", "--cov-report=term"])
        description += " with coverage"

    if args.pattern:
        cmd.extend(["-k", args.pattern])
        description += f" (pattern: {args.pattern})"

    if args.file:
        cmd.append(f"tests/{args.file}")
        description += f" (file: {args.file})"
    else:
        cmd.append("tests/")

    return run_command(cmd, description)


def check_environment():
    """Check if the environment is set up correctly"""
    print("🔍 Checking test environment...")

    if not Path("snookerlive").exists():
        print("❌ Not in the correct directory. Please run from project root.")
        return False

    if not Path("pyproject.toml").exists():
        print("❌ pyproject.toml not found")
        return False

    if not Path("tests").exists():
        print("❌ tests directory not found")
        return False

    print("✅ Environment looks good")
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Test runner for the snookerlive score board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                         # Run all tests
  python run_tests.py --unit                  # Run unit tests only
  python run_tests.py --integration --fast    # Integration tests, skip slow ones
  python run_tests.py --pattern cancel        # Run tests with 'cancel' in the name
  python run_tests.py --file test_api.py      # Run specific test file
        """,
    )

    test_group = parser.add_mutually_exclusive_group()
    test_group.add_argument("--unit", action="store_true", help="Run unit tests only")
    test_group.add_argument(
        "--integration", action="store_true", help="Run integration tests only"
    )

    parser.add_argument(
        "--coverage", action="store_true", help="Run tests with coverage reporting"
    )
    parser.add_argument("--fast", action="store_true", help="Skip slow tests")
    parser.add_argument("--pattern", help="Run tests matching this pattern")
    parser.add_argument("--file", help="Run specific test file (e.g., test_api.py)")
    parser.add_argument(
        "--install-deps",
        action="store_true",
        help="Install dependencies before running tests",
    )
    parser.add_argument(
        "--no-env-check", action="store_true", help="Skip environment checks"
    )

    args = parser.parse_args()

    print("🧪 Snookerlive Test Runner")
    print("=" * 60)

    if not args.no_env_check and not check_environment():
        return 1

    if args.install_deps:
        if install_dependencies() != 0:
            return 1

    exit_code = run_tests(args)

    print(f"\n{'='*60}")
    if exit_code == 0:
        print("🎉 All tests passed!")
        if args.coverage:
            print("📊 Coverage report generated in htmlcov/")
    else:
        print("💥 Some tests failed")
        print("📋 Check the output above for details")
    print(f"{'='*60}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
