"""Commit Event - subject and trailer parsing for a pushed commit."""

import re
from dataclasses import dataclass

from congratsbot import BOT_NAME, ConfigError

COAUTHOR_PATTERN = re.compile(r'Co-authored-by: (.+) <.+>', re.IGNORECASE)


def first_line(message: str) -> str:
    return message.split('\n')[0]


def sanitize_subject(subject: str) -> str:
    """Make a subject safe to drop inside a markdown code span and link."""
    return subject.replace('`', '').replace('-', '–')


def extract_coauthors(message: str) -> list[str]:
    """Distinct co-author names from the message trailers, bot excluded.

    Scanning starts at the third line, after the subject and the blank
    separator. Names keep first-seen order.
    """
    names = []
    for line in message.split('\n')[2:]:
        match = COAUTHOR_PATTERN.search(line)
        if match:
            names.append(match.group(1))

    unique = list(dict.fromkeys(names))
    return [name for name in unique if name != BOT_NAME]


@dataclass(frozen=True)
class CommitEvent:
    """The merged commit being announced."""
    author: str
    id: str
    message: str
    repo: str

    def validate(self) -> None:
        """Fail fast if any field is empty."""
        empty = [name for name in ('author', 'id', 'message', 'repo') if not getattr(self, name)]
        if empty:
            raise ConfigError(f"Commit event is missing: {', '.join(empty)}")

    @property
    def subject(self) -> str:
        return sanitize_subject(first_line(self.message))

    @property
    def commit_url(self) -> str:
        return f"https://github.com/{self.repo}/commit/{self.id}"

    @property
    def coauthors(self) -> list[str]:
        return extract_coauthors(self.message)
