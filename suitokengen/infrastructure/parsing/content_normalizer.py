"""Reduce Move source text to a whitespace- and comment-insensitive fingerprint."""

COMMENT_MARKER = "//"


def strip_comment(line: str) -> str:
    """Drop everything from the first ``//`` (which also covers ``///``)."""
    index = line.find(COMMENT_MARKER)
    if index == -1:
        return line
    return line[:index]


def normalize(text: str) -> str:
    """Normalize Move source for comparison.

    Comments are removed, every line is trimmed, blank lines are dropped and
    the remaining lines are joined with no separator. The result is a
    comparison fingerprint, not valid source: tokens on adjacent lines may
    run together.

    A ``//`` formed by the join itself (a line ending in ``/`` followed by
    one starting with ``/``) also starts a comment.
    """
    lines = (strip_comment(line).strip() for line in text.splitlines())
    joined = "".join(line for line in lines if line)
    return strip_comment(joined).strip()
