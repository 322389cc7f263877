import re
from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _upi_payer(match):
    name = match.group(1).split("@")[0]
    if not name or re.match(r"^\d+$", name):
        return "UPI Payment"
    return name


def _padded_last4(match):
    digits = match.group(1)
    return digits[-4:] if len(digits) >= 4 else digits.zfill(4)


class KeralaGraminBankParser(BankParser):
    """
    Parser for Kerala Gramin Bank (India) SMS messages.

    Alerts follow one fixed template, so only that template is read and no
    generic fallback is attempted for amount or type.
    """

    region = INDIA
    senders = Senders(contains=("KGBANK", "KERALA GRAMIN", "KERALAGR"))

    TRANSACTION_PHRASES = ("debited for", "is debited", "credited with", "is credited")

    AMOUNT = Cascade(amount(r"(?:debited for|credited with)\s+(?:Rs\.?|INR)\s*" + NUMBER))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debited for", "is debited"),
        when(TransactionType.INCOME, "credited with", "is credited"),
    )

    MERCHANT = Cascade(
        label(r"credited to", "UPI Transfer", requires=("debited",)),
        rule(r"\bfrom\s+([^.\s]+@[a-z]+)", _upi_payer),
    )

    ACCOUNT = Cascade(rule(r"(?:a/c no\.|Account)\s+(?:XXXX|XX)(\d{3,5})", _padded_last4))

    REFERENCE = Cascade(group(r"UPI Ref\.?\s*no\.?\s*(\d+)"))

    def get_bank_name(self) -> str:
        return "Kerala Gramin Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "otp" in lower or "password" in lower:
            return False
        return contains_any(lower, self.TRANSACTION_PHRASES)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message, transform=self.clean_merchant_name)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message)
