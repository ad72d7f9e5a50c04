"""Finding issue references in chat text."""

import re

MENTION_PATTERN = re.compile(r"#([0-9]+)")

# GitHub issue numbers are 32-bit; longer digit runs cannot name an issue.
MAX_MENTION_DIGITS = 10


def extract_mention(text: str | None) -> int | None:
    """Return the number of the first ``#<digits>`` token in ``text``.

    Later mentions in the same message are ignored. A first token too long
    to be an issue number counts as no mention.
    """
    if not text:
        return None
    match = MENTION_PATTERN.search(text)
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) > MAX_MENTION_DIGITS:
        return None
    return int(digits)
