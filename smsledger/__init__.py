from smsledger.compiled_patterns import CompiledPatterns
from smsledger.constants import Constants
from smsledger.mandate_info import BalanceUpdateInfo, MandateInfo
from smsledger.outcome import ParseOutcome, ParseResult, parse_message
from smsledger.parsed_transaction import ParsedTransaction
from smsledger.transaction_type import TransactionType

__version__ = "0.3.0"

__all__ = [
    "BalanceUpdateInfo",
    "CompiledPatterns",
    "Constants",
    "MandateInfo",
    "ParseOutcome",
    "ParseResult",
    "ParsedTransaction",
    "TransactionType",
    "parse_message",
]
