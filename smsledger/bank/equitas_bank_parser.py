from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, when
from smsledger.transaction_type import TransactionType

_END = r"(?:\.\s*Avl|\.\s*Not|\.$)"


class EquitasBankParser(BankParser):
    """
    Parser for Equitas Small Finance Bank SMS messages.
    """

    region = INDIA
    # Sender IDs are spelled several ways
    senders = Senders(contains=("EQUTAS", "EQUITA", "EQUITS"))

    NOT_TRANSACTIONS = ("otp", "one time password", "verification code", "offer", "discount")
    KEYWORDS = ("debited", "credited", "withdrawn", "deposited", "transferred", "received", "paid")

    AMOUNT = Cascade(amount(r"INR\s+" + NUMBER + r"\s+(?:debited|credited)"))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debited", "withdrawn"),
        when(TransactionType.INCOME, "credited", "deposited"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r"on\s+\d{2}-\d{2}-\d{2}\s+to\s+([^.]+?)" + _END, requires=("debited",)),
        group(r"on\s+\d{2}-\d{2}-\d{2}\s+from\s+([^.]+?)" + _END, requires=("credited",)),
        label(r"via\s+upi", "UPI Transaction"),
    )

    ACCOUNT = Cascade(group(r"(?:Equitas\s+)?A/c\s+X*(\d{2,4})"))

    BALANCE = Cascade(amount(r"Avl\s+Bal\s+is\s+INR\s+" + NUMBER))

    REFERENCE = Cascade(group(r"-?Ref[:\s]*([A-Z0-9]+)"))

    def get_bank_name(self) -> str:
        return "Equitas Small Finance Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.NOT_TRANSACTIONS):
            return False
        return contains_any(lower, self.KEYWORDS)
