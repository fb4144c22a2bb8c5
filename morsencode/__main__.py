"""Package entry point for ``python -m morsencode``.

WHY: Lets the converter run without the console script installed, e.g.
``echo sos | python -m morsencode``.

HOW: Delegates to the CLI's main() function.
"""

from morsencode.cli import main

if __name__ == "__main__":
    main()
