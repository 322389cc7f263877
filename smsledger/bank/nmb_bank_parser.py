from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import NEPAL
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _joined_account(match) -> str:
    digits = match.group(1) + match.group(2)
    return digits[-4:] if len(digits) >= 4 else digits.zfill(4)


class NMBBankParser(BankParser):
    """
    Parser for NMB Bank (Nabil Bank - Nepal) SMS messages.
    """

    region = NEPAL
    senders = Senders(exact=("NMB_ALERT", "NMBBANK"), contains=("NMB", "NABIL"))

    KEYWORDS = ("fund transfer", "withdrawn", "deposited", "wallet load", "successful", "credited")

    AMOUNT = Cascade(
        amount(r"NPR\s+" + NUMBER),
        amount(r"of\s+" + NUMBER + r"\s+is\s+successful"),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "fund transfer"),
        when(TransactionType.EXPENSE, "transfer", all_of=("to a/c",)),
        when(TransactionType.EXPENSE, "withdrawn", "wallet load", "esewa wallet"),
        when(TransactionType.INCOME, "deposited", "credited"),
    )

    MERCHANT = Cascade(
        label(r"transfer", "Fund Transfer"),
        rule(r"\bat\s+([^.\n]+?)(?:\s+on|\.)", lambda m: "ATM - " + m.group(1).strip(), requires=("withdrawn",)),
        label(r"withdrawn", "ATM Withdrawal"),
        label(r"Esewa\s+Wallet\s+Load\s+for\s+\d+", "Esewa Wallet Load"),
        label(r"wallet\s+load", "Wallet Load"),
    )

    ACCOUNT = Cascade(
        rule(r"A/C\s+(\d{8,})", lambda m: m.group(1)[-4:]),
        rule(r"A/C\s+(\d+)#(\d+)", _joined_account),
        rule(r"to\s+A/C\s+(\d+)", lambda m: m.group(1)[-4:]),
    )

    REFERENCE = Cascade(
        group(r"\(FBS:D:FPQR:(\d+)\)", flags=0),
        group(r"Ref(?:erence)?[:\s]+([A-Z0-9]+)"),
    )

    def get_bank_name(self) -> str:
        return "NMB Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "otp" in lower or "password" in lower:
            return False
        if "click here to learn more" in lower and "withdrawn" not in lower:
            return False
        return contains_any(lower, self.KEYWORDS)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message)
