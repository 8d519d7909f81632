import sys

from lint import main as lint_main
from pytest import console_main as test_main


def main() -> None:
    """Test harness entry point.

        python tools/test.py             Run the tests, then the linters.
        python tools/test.py test ARGS   Just run the tests; ARGS go to pytest.
        python tools/test.py lint ARGS   Just run the linters; ARGS go to lint.py.
    """
    if len(sys.argv) > 1 and sys.argv[1] in ("test", "lint"):
        command = sys.argv[1]
        sys.argv = [sys.argv[0]] + sys.argv[2:]
        if command == "test":
            sys.exit(test_main())
        lint_main()
        return

    status = test_main()
    if status:
        sys.exit(status)
    lint_main()


if __name__ == "__main__":
    main()
