"""Commit Parsing Package"""

from congratsbot.git.commit import (
    COAUTHOR_PATTERN,
    CommitEvent,
    extract_coauthors,
    first_line,
    sanitize_subject,
)

__all__ = [
    "COAUTHOR_PATTERN",
    "CommitEvent",
    "extract_coauthors",
    "first_line",
    "sanitize_subject",
]
