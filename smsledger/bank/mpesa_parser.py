import re
from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.mpesa_tanzania_parser import MPesaTanzaniaParser
from smsledger.bank.regions import KENYA_MOBILE
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.mandate_info import BalanceUpdateInfo
from smsledger.parsed_transaction import ParsedTransaction
from smsledger.transaction_type import TransactionType

_TANZANIAN = re.compile(r"\b(?:TZS|Tsh)", re.IGNORECASE)


def _payer(match) -> str:
    # "JOHN DOE 0712345678." -> "JOHN DOE"
    name = match.group(1).strip().rstrip(".").strip()
    name = re.sub(r"\s+0\d{9,10}$", "", name)
    return re.sub(r"\s+\d{6,}$", "", name).strip()


class MPESAKenyaParser(BankParser):
    """
    Parser for M-PESA (Kenya) mobile money SMS messages.
    """

    region = KENYA_MOBILE
    senders = Senders(contains=("MPESA", "M-PESA"))

    AMOUNT = Cascade(
        amount(r"Ksh\.?\s*" + NUMBER + r"\s+(?:paid|sent|received)"),
        amount(r"received\s+Ksh\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "you have received", "received ksh"),
        when(TransactionType.EXPENSE, "paid to", "sent to"),
    )

    MERCHANT = Cascade(
        group(r"paid\s+to\s+(.+?)\s+\d+\.\s+on"),
        group(r"paid\s+to\s+(.+?)\.\s+on"),
        group(r"sent\s+to\s+(.+?)\s+0\d{3}\s*\d{3}\s*\d{3}"),
        group(r"sent\s+to\s+(.+?)\s+for\s+account"),
        rule(r"received\s+(?:Ksh\.?\s*[0-9,]+(?:\.[0-9]{2})?\s+)?from\s+(.+?)\s+on\b", _payer),
        rule(r"from\s+([^.]+)\.\s+on\b", _payer),
    )

    BALANCE = Cascade(amount(r"New\s+M-PESA\s+balance\s+is\s+Ksh\.?\s*" + NUMBER))

    REFERENCE = Cascade(
        group(r"^([A-Z0-9]{10})\s+Confirmed"),
        group(r"Congratulations!\s+([A-Z0-9]{10})\s+confirmed"),
    )

    def get_bank_name(self) -> str:
        return "M-PESA"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "confirmed" not in lower:
            return False
        return contains_any(lower, ("paid to", "sent to", "received", "new m-pesa balance"))

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.BALANCE(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message)


class MPESAParser(BankParser):
    """
    M-PESA receipts from Kenya and Tanzania.

    Both countries send from ``MPESA``, so the sender cannot tell them
    apart; a message quoting Tanzanian shillings goes to the Tanzania
    parser and everything else to the Kenya one.
    """

    region = KENYA_MOBILE
    senders = MPESAKenyaParser.senders

    def __init__(self):
        self.kenya = MPESAKenyaParser()
        self.tanzania = MPesaTanzaniaParser()

    def get_bank_name(self) -> str:
        return "M-PESA"

    def variant(self, message: str) -> BankParser:
        if _TANZANIAN.search(message):
            return self.tanzania
        return self.kenya

    def parse(self, sms_body: str, sender: str, timestamp: int) -> Optional[ParsedTransaction]:
        return self.variant(sms_body).parse(sms_body, sender, timestamp)

    def is_transaction_message(self, message: str) -> bool:
        return self.variant(message).is_transaction_message(message)

    def get_currency(self) -> str:
        return self.kenya.get_currency()

    def is_balance_update_notification(self, message: str) -> bool:
        return self.variant(message).is_balance_update_notification(message)

    def parse_balance_update(self, message: str) -> Optional[BalanceUpdateInfo]:
        return self.variant(message).parse_balance_update(message)
