"""Configuration Package

The only place that reads the process environment. Everything downstream
works on a Config instance.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from congratsbot import (
    DEFAULT_COAUTHOR_TEMPLATES,
    DEFAULT_EMOJIS,
    REQUIRED_ENV_VARS,
    ConfigError,
)
from congratsbot.git import CommitEvent
from congratsbot.output import print_warning


@dataclass
class Config:
    """Inputs for a single run."""
    author: str
    commit_id: str
    commit_message: str
    repo: str
    emojis: list[str] = field(default_factory=lambda: list(DEFAULT_EMOJIS))
    templates: list[str] = field(default_factory=lambda: list(DEFAULT_COAUTHOR_TEMPLATES))

    def to_event(self) -> CommitEvent:
        return CommitEvent(
            author=self.author,
            id=self.commit_id,
            message=self.commit_message,
            repo=self.repo,
        )


def parse_emojis(raw: Optional[str]) -> list[str]:
    """Split a comma-separated emoji list, falling back to the defaults."""
    if not raw:
        return list(DEFAULT_EMOJIS)
    emojis = [e.strip() for e in raw.split(',') if e.strip()]
    return emojis or list(DEFAULT_EMOJIS)


def parse_templates(raw: Optional[str]) -> list[str]:
    """Parse a JSON array of co-author templates.

    Invalid JSON, a non-array value or an array holding anything other
    than strings is reported and replaced by the defaults. Absent or empty
    input falls back silently.
    """
    if not raw or not raw.strip():
        return list(DEFAULT_COAUTHOR_TEMPLATES)

    try:
        templates = json.loads(raw)
    except json.JSONDecodeError as e:
        print_warning(
            "Failed to parse `COAUTHOR_TEMPLATES` as JSON. "
            f"Falling back to default templates.\n  {e}"
        )
        return list(DEFAULT_COAUTHOR_TEMPLATES)

    if not isinstance(templates, list) or not all(isinstance(t, str) for t in templates):
        print_warning(
            "`COAUTHOR_TEMPLATES` must be a JSON array of strings. "
            "Falling back to default templates."
        )
        return list(DEFAULT_COAUTHOR_TEMPLATES)

    return templates or list(DEFAULT_COAUTHOR_TEMPLATES)


def missing_input_message(environ: Mapping[str, str]) -> str:
    return (
        "Missing input.\n"
        f"Required environment variables: {', '.join(REQUIRED_ENV_VARS)}\n\n"
        f"Available environment variables: {', '.join(environ.keys())}\n"
    )


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a Config from the environment.

    Raises:
        ConfigError: if any required variable is missing or empty
    """
    if environ is None:
        environ = os.environ

    if not all(environ.get(name) for name in REQUIRED_ENV_VARS):
        raise ConfigError(missing_input_message(environ))

    return Config(
        author=environ['COMMIT_AUTHOR'],
        commit_id=environ['COMMIT_ID'],
        commit_message=environ['COMMIT_MESSAGE'],
        repo=environ['GITHUB_REPO'],
        emojis=parse_emojis(environ.get('EMOJIS')),
        templates=parse_templates(environ.get('COAUTHOR_TEMPLATES')),
    )


__all__ = [
    "Config",
    "load_config",
    "parse_emojis",
    "parse_templates",
    "missing_input_message",
]
