from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import TANZANIA_MOBILE
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, when
from smsledger.transaction_type import TransactionType

_SHILLINGS = r"(?:TZS|Tsh\.?)\s*"


class MPesaTanzaniaParser(BankParser):
    """
    Parser for M-Pesa Tanzania (Vodacom) mobile money SMS messages.
    """

    region = TANZANIA_MOBILE
    senders = Senders(contains=("MPESA", "M-PESA", "VODACOM"))

    AMOUNT = Cascade(amount(_SHILLINGS + NUMBER))

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "you have received", "received tsh", "received tzs"),
        when(TransactionType.EXPENSE, "sent to", "paid to", "withdrawn"),
    )

    MERCHANT = Cascade(
        group(r"from\s+([A-Z][A-Za-z\s]+?)(?:\s*\(|$)"),
        group(r"sent\s+to\s+([A-Z][A-Za-z\s]+?)(?:\s*\(|$)"),
        group(r"paid\s+to\s+([A-Za-z0-9\s]+?)(?:\s*\(Merchant|\s+on|\s*$)"),
        group(r"paid\s+to\s+(\w+)\s+for\s+account"),
    )

    BALANCE = Cascade(amount(r"New\s+M-Pesa\s+balance\s+is\s+" + _SHILLINGS + NUMBER))

    REFERENCE = Cascade(
        group(r"^([A-Z0-9]{10})\s+Confirmed"),
        group(r"TIPS\s+Reference[:\s]+([A-Z0-9]+)"),
    )

    def get_bank_name(self) -> str:
        return "M-Pesa Tanzania"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "confirmed" not in lower or not contains_any(lower, ("tzs", "tsh")):
            return False
        return contains_any(lower, ("received", "sent to", "paid to", "withdrawn", "new m-pesa balance"))

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.BALANCE(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message)
