"""Message Composer - Build the merge announcement for a commit."""

import random
from typing import Protocol, Sequence, TypeVar

from congratsbot import DEFAULT_COAUTHOR_TEMPLATES, DEFAULT_EMOJIS, NAMES_PLACEHOLDER
from congratsbot.git import CommitEvent

T = TypeVar('T')


class Chooser(Protocol):
    """Anything with random.Random.choice semantics."""

    def choice(self, seq: Sequence[T]) -> T: ...


def pick(items: Sequence[T], rng: Chooser) -> T:
    return rng.choice(items)


def make_list(names: list[str]) -> str:
    """Generate 'foo, bar & baz' from ['foo', 'bar', 'baz']."""
    if not names:
        return ''
    if len(names) == 1:
        return names[0]
    return ', '.join(names[:-1]) + ' & ' + names[-1]


def coauthor_thanks(names: list[str], templates: Sequence[str], rng: Chooser) -> str:
    """Pick a thank-you line for the co-authors, or '' when there are none."""
    if not names:
        return ''
    template = pick(templates, rng)
    return '\n_' + template.replace(NAMES_PLACEHOLDER, make_list(names), 1).strip() + '_'


class MessageComposer:
    """Turns a CommitEvent into the chat message."""

    def __init__(
        self,
        emojis: Sequence[str] | None = None,
        templates: Sequence[str] | None = None,
        rng: Chooser | None = None,
    ):
        self.emojis = list(emojis) if emojis else list(DEFAULT_EMOJIS)
        self.templates = list(templates) if templates else list(DEFAULT_COAUTHOR_TEMPLATES)
        self.rng = rng if rng is not None else random.Random()

    def compose(self, event: CommitEvent) -> str:
        event.validate()

        emoji = pick(self.emojis, self.rng)
        thanks = coauthor_thanks(event.coauthors, self.templates, self.rng)
        return (
            f"{emoji} **Merged!** {event.author}: "
            f"[`{event.subject}`](<{event.commit_url}>)"
            f"{thanks}"
        )
