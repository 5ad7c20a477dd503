"""
Congratsbot

Celebratory chat notifications for merged commits.
"""

__version__ = "1.0.0"

# Built-in banks - used when EMOJIS / COAUTHOR_TEMPLATES are not provided
DEFAULT_EMOJIS = ['🎉', '🎊', '🧑‍🚀', '🥳', '🙌', '🚀']

DEFAULT_COAUTHOR_TEMPLATES = [
    'Thanks <names> for helping! ✨',
    '<names> stepped up to lend a hand — thank you! 🙌',
    '<names> with the assist! 💪',
    'Couldn’t have done this without <names>! 💜',
    'Made even better by <names>! 🚀',
    'And the team effort award goes to… <names>! 🏆',
    'Featuring contributions by <names>! 🌟',
]

NAMES_PLACEHOLDER = '<names>'

# Commits pushed by the CI identity never get a thank-you
BOT_NAME = 'github-actions[bot]'

OUTPUT_NAME = 'DISCORD_MESSAGE'

REQUIRED_ENV_VARS = ['COMMIT_AUTHOR', 'COMMIT_ID', 'COMMIT_MESSAGE', 'GITHUB_REPO']


class CongratsbotError(Exception):
    """Base class for errors that abort a run."""
    pass


class ConfigError(CongratsbotError):
    """Raised when required input is missing."""
    pass
