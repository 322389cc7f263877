from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, when
from smsledger.transaction_type import TransactionType


class SouthIndianBankParser(BankParser):
    """
    South Indian Bank specific parser.

    Counterparts sit in an ``Info:`` trailer (``Info:UPI/<ref>/<rrn>/<name>``,
    ``Info: IMPS/<ref>/<rrn>/<name>``). Messages with no recognisable debit or
    credit wording are dropped rather than guessed.
    """

    region = INDIA
    senders = Senders(
        exact=("SOUTHINDIANBANK",),
        contains=("SIBSMS", "SIBBANK"),
        patterns=(r"^(?:AD|CP|VM)-SIB",),
    )

    EXTRA_VERBS = ("debit", "credit", "refund", "cashback", "upi")

    AMOUNT = Cascade(amount(r"(?:Rs\.?|INR)\s*" + NUMBER))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debit", "withdrawn", "spent", "purchase", "paid", "transfer to"),
        when(TransactionType.INCOME, "credit", "deposited", "received", "refund", "transfer from", "cashback"),
    )

    MERCHANT = Cascade(
        group(r"Info:\s*IMPS/[^/]+/[^/]+/([^.]+)", requires=("imps", "info:")),
        group(r"Info:\s*UPI/[^/]+/[^/]+/\s*([^/]+?)\s+on", requires=("upi",)),
        group(r"^.{0,200}?\bto\s+([^,\s]+@[^\s,]+)", requires=("upi",)),
        group(r"^.{0,200}?\bfrom\s+([^,\s]+@[^\s,]+)", requires=("upi", "credit")),
        label(r"\bUPI\b", "UPI Credit", requires=("credit",)),
        label(r"\bUPI\b", "UPI Transaction"),
        group(r"(?:DEBIT|CREDIT)[:\s]*Rs\.?\s*[\d,]+(?:\.\d{2})?\s+([A-Z\s]{3,}?)\s+(?:Bal|Available)"),
        label(r"\bATM\b|withdrawn", "ATM"),
        group(r"\bat\s+([^,\n]+?)(?:\s+on|\s*,|$)", requires=("card",)),
    )

    REFERENCE = Cascade(
        group(r"Info:\s*(?:IMPS|UPI)/[^/]+/([^/]+)/", requires=("info:",)),
        group(r"RRN[:\s]*(\d{12})"),
        group(r"Ref(?:erence)?[:\s]*([A-Z0-9]+)"),
    )

    ACCOUNT = Cascade(
        group(r"A/c\s+[X*]*(\d{4})"),
        group(r"Account\s+[X*]*(\d{4})"),
        group(r"\bfrom\s+[X*]*(\d{4})"),
        group(r"\bto\s+[X*]*(\d{4})"),
    )

    BALANCE = Cascade(
        amount(r"Final\s+balance\s+is\s+Rs\.?\s*" + NUMBER),
        amount(r"Bal(?:ance)?[:\s]*Rs\.?\s*" + NUMBER),
        amount(r"Avl\s+Bal[:\s]*Rs\.?\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "South Indian Bank"

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "upi auto pay" in lower and "is scheduled on" in lower:
            return False
        return super().is_transaction_message(message)
