from typing import Iterable, Iterator, List, Optional, Tuple

from smsledger.bank.bank_parser import BankParser
from smsledger.logging_setup import get_logger

logger = get_logger(__name__)


class BankParserRegistry:
    """
    Fixed, ordered collection of parsers.

    ``resolve`` returns the first parser whose ``can_handle`` accepts the
    sender, so order decides between parsers with overlapping sender
    patterns. The collection is frozen at construction and safe to share
    between threads.
    """

    __slots__ = ("_parsers",)

    def __init__(self, parsers: Iterable[BankParser]):
        parsers = tuple(parsers)
        seen = set()
        for parser in parsers:
            name = parser.get_bank_name()
            if name in seen:
                raise ValueError(f"Duplicate parser for bank {name!r}")
            seen.add(name)
        object.__setattr__(self, "_parsers", parsers)

    def __setattr__(self, name, value):
        raise AttributeError("BankParserRegistry is immutable")

    def resolve(self, sender: str) -> Optional[BankParser]:
        """Returns the parser for ``sender``, or None when no parser claims it."""
        if not sender:
            return None
        for parser in self._parsers:
            if parser.can_handle(sender):
                return parser
        return None

    get_parser = resolve

    def get_parser_by_name(self, bank_name: str) -> Optional[BankParser]:
        for parser in self._parsers:
            if parser.get_bank_name() == bank_name:
                return parser
        return None

    def is_known_sender(self, sender: str) -> bool:
        return self.resolve(sender) is not None

    @property
    def parsers(self) -> Tuple[BankParser, ...]:
        return self._parsers

    def bank_names(self) -> List[str]:
        return [parser.get_bank_name() for parser in self._parsers]

    def __iter__(self) -> Iterator[BankParser]:
        return iter(self._parsers)

    def __len__(self) -> int:
        return len(self._parsers)

    def __repr__(self) -> str:
        return f"BankParserRegistry({len(self._parsers)} parsers)"
