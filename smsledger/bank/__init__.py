"""Bank and provider parsers.

The ready-made registry lives in ``smsledger.bank.bank_parser_factory``.
"""

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.bank_parser_registry import BankParserRegistry

__all__ = ["BankParser", "BankParserRegistry"]
