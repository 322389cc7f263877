import re
from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import UNITED_STATES
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType


class AdelFiParser(BankParser):
    """
    Parser for AdelFi Credit Union transactions.

    Every alert is a card transaction; the amount is written in brackets,
    e.g. ``had a transaction of ($12.50)``.
    """

    region = UNITED_STATES
    senders = Senders(contains=("42141",))

    AMOUNT = Cascade(amount(r"\(\$(\d+(?:\.\d{2})?)\)", flags=0))

    TYPES = DecisionTable(when(TransactionType.CREDIT))

    MERCHANT = Cascade(rule(r"Description:\s*(.+?)(?:\.\s*Date:|$)", lambda m: re.sub(r"^\d+\s+", "", m.group(1).strip())))

    ACCOUNT = Cascade(group(r"\*\*(\d{4})"))

    def get_bank_name(self) -> str:
        return "AdelFi"

    def is_transaction_message(self, message: str) -> bool:
        return "Transaction Alert from AdelFi" in message and "had a transaction of" in message

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message, transform=self.clean_merchant_name, accept=bool)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)
