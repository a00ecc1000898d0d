"""Insert/delete edit distance with recursive, memoized and dynamic-programming algorithms, a file-comparing command and a timing benchmark."""

__version__ = "0.1.0"