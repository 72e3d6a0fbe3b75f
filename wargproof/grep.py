"""Print the lines of standard input that contain a pattern."""

from __future__ import annotations

import os
import sys


def _fatal(message: object) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Filter standard input by the pattern given as the first argument."""
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "grep"
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return _fatal(f"usage: {program} <pattern>")
    pattern = args[0]

    try:
        for raw in sys.stdin:
            line = raw[:-1] if raw.endswith("\n") else raw
            if line.endswith("\r"):
                line = line[:-1]
            if pattern in line:
                print(line)
    except (OSError, UnicodeDecodeError) as exc:
        return _fatal(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())