"""Run the Python linters over the repository.

    python tools/lint.py           Check everything.
    python tools/lint.py --fix     Let isort and black rewrite files in place, then check.
    python tools/lint.py FILE...   Only look at the given files or directories.
"""

import argparse
import os
import subprocess
import sys
from typing import List

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_TARGETS = ["tabulated", "tests", "tools", "setup.py"]


def run_command(*args: str, verbose: bool) -> bool:
    if verbose:
        print(" ".join(args))
    result = subprocess.run(args, cwd=REPO_ROOT, capture_output=not verbose, text=True)
    if result.returncode and not verbose:
        print(result.stdout, end="")
        print(result.stderr, end="", file=sys.stderr)
    return result.returncode == 0


def lint(targets: List[str], verbose: bool) -> bool:
    ok = True
    for tool in (
        ["flake8"],
        ["isort", "--atomic", "--check-only"],
        ["black", "--line-length", "100", "--check"],
        ["mypy"],
    ):
        if not run_command(sys.executable, "-m", *tool, *targets, verbose=verbose):
            ok = False
    print(f'Lint of {", ".join(targets)} {"successful" if ok else "failed"}!')
    return ok


def fix(targets: List[str], verbose: bool) -> None:
    run_command(sys.executable, "-m", "isort", "--atomic", *targets, verbose=verbose)
    run_command(
        sys.executable, "-m", "black", "--line-length", "100", *targets, verbose=verbose
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Lint the tabulated repository")
    parser.add_argument("--fix", action="store_true", help="Rewrite files where possible")
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("targets", nargs="*", default=DEFAULT_TARGETS)
    args = parser.parse_args()

    if args.fix:
        fix(args.targets, args.verbose)
    if not lint(args.targets, args.verbose):
        sys.exit(1)


if __name__ == "__main__":
    main()
