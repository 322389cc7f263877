import dataclasses
from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.fab_parser import coded_amount
from smsledger.bank.regions import EGYPT
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, scan, when
from smsledger.constants import Constants
from smsledger.parsed_transaction import ParsedTransaction
from smsledger.transaction_type import TransactionType

_SPENT = ("was charged", "was debited", "was spent")


def _known_code(match) -> Optional[str]:
    code = match.group(1)
    return code if code in Constants.Currency.KNOWN else None


class CIBEgyptParser(BankParser):
    """
    Parser for CIB (Commercial International Bank) Egypt SMS messages.

    Card alerts carry the available limit on every spend, so it is kept
    whatever the transaction type.
    """

    region = EGYPT
    senders = Senders(contains=("CIB",), dlt_codes=("CIB",))

    EXTRA_VERBS = _SPENT + ("has been refunded",)

    AMOUNT = Cascade(scan(r"(?:for|with)\s+([A-Z]{3})\s+([0-9,]*\.?\d+)", coded_amount))

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "refunded"),
        when(TransactionType.EXPENSE, *_SPENT),
        when(TransactionType.INCOME, "credited"),
    ) + EGYPT.TYPES

    MERCHANT = Cascade(
        group(r"\bat\s+([A-Z0-9\s/&\-]+?)\s+on\s+\d", requires=(_SPENT,)),
        group(r"from\s+([A-Z0-9\s/&\-]+?)\s+with\s+[A-Z]{3}", requires=("refunded",)),
    )

    ACCOUNT = Cascade(group(r"(?:credit\s+card|card)\s*(?:ending\s+with)?#(\d{4})"))

    LIMIT = Cascade(amount(r"(?:Card\s+)?available\s+limit\s+is\s+[A-Z]{3}\s+" + NUMBER))

    # "with EUR .93": the code may precede a bare fraction
    CURRENCY = Cascade(scan(r"(?:for|with)\s+([A-Z]{3})\s+[.\d]", _known_code, flags=0))

    def get_bank_name(self) -> str:
        return "CIB Egypt"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.region.OTP_PHRASES):
            return False
        return contains_any(lower, self.EXTRA_VERBS + ("credited",))

    def build_transaction(
        self,
        sms_body: str,
        sender: str,
        timestamp: int,
        amount: Decimal,
        txn_type: TransactionType,
    ) -> ParsedTransaction:
        record = super().build_transaction(sms_body, sender, timestamp, amount, txn_type)
        if record.credit_limit is not None:
            return record
        return dataclasses.replace(record, credit_limit=self.extract_available_limit(sms_body))

    def extract_currency(self, message: str) -> Optional[str]:
        return self.CURRENCY(message) or super().extract_currency(message)

    def detect_is_card(self, message: str) -> bool:
        return contains_any(message.lower(), ("credit card", "debit card", "card ending", "card#"))
