"""Message Composition Package"""

from congratsbot.message.composer import MessageComposer, coauthor_thanks, make_list, pick

__all__ = [
    "MessageComposer",
    "coauthor_thanks",
    "make_list",
    "pick",
]
