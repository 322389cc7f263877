import re
from typing import Iterable, Pattern, Tuple


def dlt(code: str) -> str:
    """Regulatory route shape ``XX-CODE`` / ``XX-CODE-S`` for a sender code."""
    return r"^[A-Z]{2}-" + re.escape(code) + r"(?:-[A-Z])?$"


class Senders:
    """
    Sender IDs one institution sends from.

    A sender matches when it equals one of ``exact``, contains one of
    ``contains`` or matches one of ``patterns`` (all compared upper-case).
    ``dlt_codes`` expands each code into its ``XX-CODE-S`` route shape.
    """

    __slots__ = ("exact", "contains", "patterns")

    def __init__(
        self,
        exact: Iterable[str] = (),
        contains: Iterable[str] = (),
        patterns: Iterable[str] = (),
        dlt_codes: Iterable[str] = (),
    ):
        self.exact = frozenset(s.upper() for s in exact)
        self.contains: Tuple[str, ...] = tuple(s.upper() for s in contains)
        compiled = [re.compile(p) for p in patterns]
        compiled.extend(re.compile(dlt(code.upper())) for code in dlt_codes)
        self.patterns: Tuple[Pattern, ...] = tuple(compiled)

    def matches(self, sender: str) -> bool:
        normalized = sender.strip().upper()
        if not normalized:
            return False
        if normalized in self.exact:
            return True
        if any(fragment in normalized for fragment in self.contains):
            return True
        return any(pattern.match(normalized) for pattern in self.patterns)

    __call__ = matches
