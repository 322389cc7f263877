"""Why a message did or did not become a transaction."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from smsledger.logging_setup import get_logger
from smsledger.parsed_transaction import ParsedTransaction

logger = get_logger(__name__)


class ParseOutcome(Enum):
    # Sender not recognized by any parser
    NO_PARSER = "no_parser"
    # Recognized sender, but an OTP, promotion, request, mandate notice or balance ping
    NOT_TRANSACTION = "not_transaction"
    # Looked like a transaction, but amount or type could not be resolved
    UNPARSEABLE = "unparseable"
    PARSED = "parsed"


@dataclass(frozen=True)
class ParseResult:
    outcome: ParseOutcome
    bank_name: Optional[str] = None
    transaction: Optional[ParsedTransaction] = None

    @property
    def parsed(self) -> bool:
        return self.outcome is ParseOutcome.PARSED


def parse_message(registry, sms_body: str, sender: str, timestamp: int) -> ParseResult:
    """Run one message through ``registry`` and classify the result."""
    parser = registry.resolve(sender)
    if parser is None:
        logger.debug("No parser for sender %r", sender)
        return ParseResult(ParseOutcome.NO_PARSER)

    bank_name = parser.get_bank_name()
    transaction = parser.parse(sms_body, sender, timestamp)
    if transaction is not None:
        return ParseResult(ParseOutcome.PARSED, bank_name, transaction)
    if parser.is_transaction_message(sms_body):
        return ParseResult(ParseOutcome.UNPARSEABLE, bank_name)
    return ParseResult(ParseOutcome.NOT_TRANSACTION, bank_name)
