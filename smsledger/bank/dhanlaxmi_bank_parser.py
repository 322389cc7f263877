from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, when
from smsledger.transaction_type import TransactionType


class DhanlaxmiBankParser(BankParser):
    """
    Parser for Dhanlaxmi Bank SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("DHANBK", "DHANLAXMI"), patterns=(r"^[A-Z]{2}-DHANBK(?:-?[A-Z])?$",))

    EXTRA_VERBS = ("is debited from", "is credited to", "credited for", "debited from a/c")

    AMOUNT = Cascade(
        amount(r"INR\s+" + NUMBER + r"\s+is\s+(?:debited|credited)"),
        amount(r"(?:credited|debited)\s+for\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "is credited", "credited to", "credited for"),
        when(TransactionType.EXPENSE, "is debited", "debited from"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r'Payment\s+from\s+([^/"]+)', requires=("upi txn",)),
        group(r"payment\s+on\s+(\w+)", requires=("upi txn",)),
        label(r"upi\s+txn", "UPI Payment"),
        label(r"debited\s+from\s+a/c", "Internal Transfer", requires=("credited",)),
    )

    ACCOUNT = Cascade(group(r"a/c\s+(?:no\.\s*)?X+(\d{4})"))

    BALANCE = Cascade(amount(r"Aval\s+Bal\s+is\s+INR\s+" + NUMBER))

    REFERENCE = Cascade(
        group(r"UPI\s+Ref\s+no\s+(\d+)"),
        group(r"UPI\s+TXN:\s*/(\d+)"),
    )

    def get_bank_name(self) -> str:
        return "Dhanlaxmi Bank"

    def is_transaction_message(self, message: str) -> bool:
        if contains_any(message.lower(), INDIA.OTP_PHRASES):
            return False
        return super().is_transaction_message(message)
