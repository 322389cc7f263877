from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, when
from smsledger.transaction_type import TransactionType


class JuspayParser(BankParser):
    """
    Parser for Juspay/Amazon Pay wallet transactions.

    Wallet receipts rarely name the counterpart, so well-known merchants
    mentioned anywhere in the text are used before the generic patterns.
    """

    region = INDIA
    senders = Senders(exact=("AMAZON PAY",), contains=("JUSPAY", "APAY"))

    EXTRA_VERBS = ("debited for", "payment of rs", "using apay balance", "transaction reference number")

    AMOUNT = Cascade(
        amount(r"debited\s+for\s+INR\s+" + NUMBER),
        amount(r"Payment\s+of\s+Rs\s+" + NUMBER),
        amount(r"\bRs\s+" + NUMBER),
        amount(r"\bINR\s+" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debited", "payment", "charged"),
        when(TransactionType.INCOME, "credited", "refunded", "received"),
    )

    MERCHANT = Cascade(
        group(r"successful\s+at\s+(.+?)(?:\s*\.\s*Updated|\.(?:\s|$))"),
        label(r"amazon", "Amazon"),
        label(r"flipkart", "Flipkart"),
        label(r"swiggy", "Swiggy"),
        label(r"zomato", "Zomato"),
        label(r"\bola\b", "Ola"),
        label(r"uber", "Uber"),
        label(r"zepto", "Zepto"),
        label(r"blinkit", "Blinkit"),
        label(r"wallet", "Amazon Pay Transaction"),
    )

    REFERENCE = Cascade(
        group(r"Transaction\s+Reference\s+Number\s+is\s+(\d{12})"),
        group(r"Reference\s+(?:Number|No)[:\s]+(\d{12})"),
    )

    def get_bank_name(self) -> str:
        return "Amazon Pay"

    def extract_merchant(self, message: str, sender: str) -> str:
        return super().extract_merchant(message, sender) or "Amazon Pay"
