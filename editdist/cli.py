"""Command line: compute the edit distance between the contents of two files."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from editdist.algorithms import get_algorithm

__all__ = ["USAGE", "UsageError", "parse_args", "read_file", "main"]

USAGE = "Usage: <program> -a <algorithm(recursive, memo, dp, dpopt)> -s1 <file.txt> -s2 <file2.txt>"

_FLAGS = {"-a": "method", "-s1": "file1", "-s2": "file2"}


class UsageError(Exception):
    """Raised when the command line is malformed."""


def parse_args(argv: Sequence[str]) -> tuple[str, str, str]:
    """Return (method, file1, file2) from ``-a M -s1 F1 -s2 F2`` in any order."""
    if len(argv) != 6:
        raise UsageError(USAGE)

    values: dict[str, str] = {}
    tokens = iter(argv)
    for token in tokens:
        key = _FLAGS.get(token)
        if key is None:
            raise UsageError(f"Incorrect argument: {token}")
        value = next(tokens, None)
        if value is None:
            raise UsageError(f"Missing value for {token}")
        values[key] = value

    missing = [flag for flag, key in _FLAGS.items() if key not in values]
    if missing:
        raise UsageError(f"Missing option(s): {', '.join(missing)}")
    return values["method"], values["file1"], values["file2"]


def read_file(path: str) -> str:
    """Return the whole contents of ``path`` unchanged."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        method, file1, file2 = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    texts = []
    for path in (file1, file2):
        try:
            texts.append(read_file(path))
        except OSError:
            print(f"Could not open file: {path}", file=sys.stderr)
            return 1
    str1, str2 = texts

    try:
        algorithm = get_algorithm(method)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"{str1} {str2}")
    print(algorithm(str1, str2))
    return 0


if __name__ == "__main__":
    sys.exit(main())