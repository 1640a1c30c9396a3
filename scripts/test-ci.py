#!/usr/bin/env python
"""
Local CI Checks for AVLTreeLib
==============================

Runs the checks a CI pipeline would run: import, fast tests with
coverage, syntax lint and type check.

Usage:
    python scripts/test-ci.py
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def run_command(cmd, description, critical=True):
    """Run a command from the project root and return True if it succeeds."""
    print(f"\n[Checking] {description}...")
    print(f"  Command: {' '.join(cmd)}")

    result = subprocess.run(cmd, cwd=PROJECT_ROOT, capture_output=True, text=True)

    if result.returncode == 0:
        print("  PASSED")
        return True
    if critical:
        print("  FAILED")
        output = result.stdout or result.stderr
        if output:
            print(f"  Output: {output[-1500:]}")
    else:
        print("  WARNING - Non-critical issue")
    return False


def main():
    print("=" * 60)
    print("AVLTREELIB LOCAL CI")
    print("=" * 60)

    checks = [
        ([sys.executable, "-c", "import avltreelib"], "Import package", True),
        ([sys.executable, "-m", "pytest", "tests", "-m", "not slow", "-q",
          "--cov=avltreelib", "--cov-report=term-missing"],
         "Fast tests with coverage", True),
        ([sys.executable, "-m", "flake8", "avltreelib", "tests",
          "--count", "--select=E9,F63,F7,F82", "--show-source"],
         "Syntax errors and undefined names", True),
        ([sys.executable, "-m", "mypy", "avltreelib", "--ignore-missing-imports"],
         "Type check", False),
    ]

    all_passed = True
    for cmd, description, critical in checks:
        if not run_command(cmd, description, critical) and critical:
            all_passed = False

    print("\n" + "=" * 60)
    print("SUCCESS: All critical checks passed" if all_passed else "FAILURE: Fix the issues above")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
