from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, group, label, when
from smsledger.transaction_type import TransactionType


class UtkarshBankParser(BankParser):
    """
    Parser for Utkarsh Small Finance Bank SuperCard credit card transactions.
    """

    region = INDIA
    senders = Senders(contains=("UTKSPR", "UTKARSH", "UTKSFB"))

    TYPES = DecisionTable(when(TransactionType.CREDIT))

    MERCHANT = Cascade(
        group(r"for\s+UPI\s*[-–]\s*(?![x0-9])([^\s.]+)"),
        group(r"\bfor\s+(?!UPI\b|INR\b)([^0-9\s]\S+?)(?:\s+on\s+|\s+at\s+|$)"),
        label(r"supercard", "UPI Payment", requires=("upi",)),
    )

    ACCOUNT = Cascade(
        group(r"SuperCard\s+[xX*]*(\d{4})"),
        group(r"(?:account|a/c)\s+[xX*]*(\d{4})"),
    )

    def get_bank_name(self) -> str:
        return "Utkarsh Bank"

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return super().extract_merchant(message, sender) or "Utkarsh SuperCard"
