"""
Snippet normalizer.

Turns a bare Go statement fragment into a complete ``package main`` program.
Detection is a line-oriented regex heuristic, not a parser: only single-line
``import "..."`` declarations are hoisted. A multi-line ``import ( ... )``
block in a fragment is not supported.
"""
import re

PACKAGE_PATTERN = re.compile(rb"^package\b", re.MULTILINE)
IMPORT_PATTERN = re.compile(rb"^import .*$", re.MULTILINE)
IMPORT_LINE_PATTERN = re.compile(rb"^import .*\n?", re.MULTILINE)

PACKAGE_HEADER = b"package main\n"
MAIN_OPEN = b"func main() {\n"
MAIN_CLOSE = b"\n}\n"


def is_complete_unit(source: bytes) -> bool:
    """Return True if the source already declares its package."""
    return PACKAGE_PATTERN.search(source) is not None


def normalize(source: bytes) -> bytes:
    """
    Wrap a fragment into a compilable program.

    Sources with a package clause are returned unchanged. Otherwise import
    lines are moved to the top and everything else becomes the body of
    ``main``.
    """
    if is_complete_unit(source):
        return source

    parts = [PACKAGE_HEADER]
    for match in IMPORT_PATTERN.finditer(source):
        parts.append(match.group(0))
        parts.append(b"\n")
    parts.append(MAIN_OPEN)
    parts.append(IMPORT_LINE_PATTERN.sub(b"", source))
    parts.append(MAIN_CLOSE)
    return b"".join(parts)
