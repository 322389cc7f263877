"""Ordered first-match-wins extraction rules.

Every extractor in the parsers is a ``Cascade`` of ``Rule`` objects: a
compiled pattern plus the function that turns its match into a value. Rules
are tried in order and the first one producing a value wins; a rule whose
match cannot be converted (a malformed number, a rejected merchant) simply
yields to the next one. Transaction-type resolution uses the same idea over
keywords with ``DecisionTable``.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterator, NamedTuple, Optional, Pattern, Sequence, Tuple, Union

PatternLike = Union[str, Pattern]

# Amount token: 1,234.50 / 1234 / 12,00,000.5
NUMBER = r"(\d[\d,]*(?:\.\d{1,2})?)"


def compile_pattern(pattern: PatternLike, flags: int = re.IGNORECASE) -> Pattern:
    if isinstance(pattern, str):
        return re.compile(pattern, flags)
    return pattern


def to_decimal(raw: Optional[str]) -> Optional[Decimal]:
    """Parse an amount token, returning None for anything that is not a finite number."""
    if raw is None:
        return None
    cleaned = raw.replace(",", "").replace(" ", "").strip().rstrip(".")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


Keyword = Union[str, Pattern, Tuple[Any, ...]]


def _hit(keyword: Keyword, lower: str) -> bool:
    if isinstance(keyword, tuple):
        return any(_hit(k, lower) for k in keyword)
    if isinstance(keyword, str):
        return keyword in lower
    return keyword.search(lower) is not None


class Rule(NamedTuple):
    pattern: Pattern
    extract: Callable[["re.Match"], Any]
    # Try every match instead of only the first one
    scan: bool = False
    # Keywords that must all appear (lowercase) before the rule is tried
    requires: Tuple[Any, ...] = ()
    # Value is returned as is, skipping the cascade's transform and accept
    final: bool = False

    def apply(self, text: str) -> Any:
        if self.requires:
            lower = text.lower()
            if not all(_hit(k, lower) for k in self.requires):
                return None
        if self.scan:
            for match in self.pattern.finditer(text):
                value = self.extract(match)
                if value is not None:
                    return value
            return None
        match = self.pattern.search(text)
        if match is None:
            return None
        return self.extract(match)


def _strip_group(index: int):
    def _extract(match):
        value = match.group(index)
        if value is None:
            return None
        value = value.strip()
        return value or None

    return _extract


def group(
    pattern: PatternLike,
    index: int = 1,
    flags: int = re.IGNORECASE,
    requires: Sequence[Any] = (),
    final: bool = False,
) -> Rule:
    """Rule yielding a stripped capture group; empty captures count as no match."""
    return Rule(compile_pattern(pattern, flags), _strip_group(index), requires=tuple(requires), final=final)


def amount(pattern: PatternLike, index: int = 1, flags: int = re.IGNORECASE, requires: Sequence[Any] = ()) -> Rule:
    """Rule yielding a Decimal from a capture group."""
    return Rule(
        compile_pattern(pattern, flags),
        lambda match: to_decimal(match.group(index)),
        requires=tuple(requires),
    )


def label(pattern: PatternLike, value: Any, flags: int = re.IGNORECASE, requires: Sequence[Any] = ()) -> Rule:
    """Rule yielding a constant whenever the pattern is found.

    Labels are final: merchant cleanup and validation never rewrite them.
    """
    return Rule(compile_pattern(pattern, flags), lambda match: value, requires=tuple(requires), final=True)


def rule(
    pattern: PatternLike,
    extract: Callable[["re.Match"], Any],
    flags: int = re.IGNORECASE,
    requires: Sequence[Any] = (),
    final: bool = False,
) -> Rule:
    return Rule(compile_pattern(pattern, flags), extract, requires=tuple(requires), final=final)


def scan(
    pattern: PatternLike,
    extract: Callable[["re.Match"], Any],
    flags: int = re.IGNORECASE,
    requires: Sequence[Any] = (),
) -> Rule:
    """Like ``rule`` but keeps looking past matches that extract to None."""
    return Rule(compile_pattern(pattern, flags), extract, scan=True, requires=tuple(requires))


class Cascade:
    def __init__(self, *rules: Rule):
        self.rules: Tuple[Rule, ...] = tuple(rules)

    def first(
        self,
        text: str,
        fallback: Optional[Callable[[str], Any]] = None,
        transform: Optional[Callable[[Any], Any]] = None,
        accept: Optional[Callable[[Any], bool]] = None,
    ) -> Any:
        """Value of the first rule that matches and survives ``transform``/``accept``.

        ``fallback`` is called with the text only when no rule produced a value.
        """
        for candidate in self.rules:
            value = candidate.apply(text)
            if value is None:
                continue
            if candidate.final:
                return value
            if transform is not None:
                value = transform(value)
                if value is None:
                    continue
            if accept is not None and not accept(value):
                continue
            return value
        if fallback is not None:
            return fallback(text)
        return None

    __call__ = first

    def __add__(self, other: "Cascade") -> "Cascade":
        return Cascade(*(self.rules + other.rules))

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


class Row(NamedTuple):
    result: Any
    any_of: Tuple[Keyword, ...]
    all_of: Tuple[Keyword, ...]
    unless: Tuple[Keyword, ...]

    def matches(self, lower: str) -> bool:
        if self.any_of and not any(_hit(k, lower) for k in self.any_of):
            return False
        if not all(_hit(k, lower) for k in self.all_of):
            return False
        return not any(_hit(k, lower) for k in self.unless)


def when(result: Any, *any_of: Keyword, all_of: Sequence[Keyword] = (), unless: Sequence[Keyword] = ()) -> Row:
    """Decision row: ``result`` if any of ``any_of`` and all of ``all_of`` appear and none of ``unless``.

    A tuple inside ``all_of`` or ``unless`` means "any of these". A row with no
    keywords at all always matches.
    """
    return Row(result, tuple(any_of), tuple(all_of), tuple(unless))


class DecisionTable:
    def __init__(self, *rows: Row):
        self.rows: Tuple[Row, ...] = tuple(rows)

    def decide(self, text: str, fallback: Optional[Callable[[str], Any]] = None) -> Any:
        lower = text.lower()
        for row in self.rows:
            if row.matches(lower):
                return row.result
        if fallback is not None:
            return fallback(text)
        return None

    __call__ = decide

    def __add__(self, other: "DecisionTable") -> "DecisionTable":
        return DecisionTable(*(self.rows + other.rows))


def contains_any(lower: str, keywords: Sequence[Keyword]) -> bool:
    return any(_hit(k, lower) for k in keywords)


def words(*keywords: str) -> Pattern:
    """One pattern matching any of ``keywords`` as whole words."""
    return re.compile(r"\b(?:" + "|".join(re.escape(k) for k in keywords) + r")\b", re.IGNORECASE)
