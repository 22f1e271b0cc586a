import re
from typing import Iterable, Set

MENTION_RE = re.compile(r"<@!?(\d+)>")
SEPARATOR_RE = re.compile(r"[\s,;]+")


def parse_exclusions(raw: str | int | Iterable[str] | None) -> Set[str]:
    """Normalize a free-text or list of exclusions into participant ids.

    Accepts chat mentions (``<@123>``, ``<@!123>``) and bare ids separated by
    commas, semicolons or whitespace.
    """
    if raw is None:
        return set()
    if isinstance(raw, (str, int)):
        chunks = [str(raw)]
    else:
        chunks = [str(item) for item in raw if item is not None]

    ids: Set[str] = set()
    for chunk in chunks:
        ids.update(MENTION_RE.findall(chunk))
        remainder = MENTION_RE.sub(" ", chunk)
        ids.update(token.lstrip("@") for token in SEPARATOR_RE.split(remainder) if token.lstrip("@"))
    return ids
