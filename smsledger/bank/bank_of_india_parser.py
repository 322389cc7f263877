import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when, words
from smsledger.transaction_type import TransactionType

_AUTOPAY_SUFFIX = re.compile(r"\s*-\s*Autopa.*$", re.IGNORECASE)
_STOP = r"(?:\s+via|\s+Ref|\s+on|$)"

MANDATE_INVESTMENTS = words("mutual fund", "iccl", "groww", "zerodha", "kuvera", "paytm money")


class BankOfIndiaParser(BankParser):
    """
    Parser for Bank of India (BOI) SMS messages.

    BOI reports both legs of a transfer ("debited ... and credited to ..."),
    so the direction is read from which leg the account is on.
    """

    region = INDIA
    senders = Senders(
        exact=("BOIIND", "BOIBNK"),
        patterns=(r"^(?:BK|JD)-BOIIND",),
        dlt_codes=("BOIIND", "BOIBNK", "BOI"),
    )

    AMOUNT = Cascade(
        amount(r"(?:Rs\.?|INR)\s*" + NUMBER + r"\s+(?:debited|credited)"),
        amount(r"withdrawn\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "deposited in your account"),
        when(TransactionType.INCOME, "cash", all_of=("deposited",)),
        when(TransactionType.INVESTMENT, MANDATE_INVESTMENTS, all_of=("mandate",)),
        when(TransactionType.EXPENSE, "debited", all_of=("and credited to",)),
        when(TransactionType.INCOME, "credited", all_of=("and debited from",)),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        label(r"cash acceptor machine", "Cash Deposit"),
        label(r"\bcash\b.*deposited|deposited.*\bcash\b", "Cash Deposit"),
        group(r"\bvia\s+([A-Za-z0-9]+)", requires=("mandate", "towards")),
        rule(
            r"towards\s+([^,\n]+?)(?:\s+for|\s*,|$)",
            lambda m: _AUTOPAY_SUFFIX.sub("", m.group(1)).strip(),
            requires=("mandate",),
        ),
        group(r"credited\s+to\s+([^.\n]+?)" + _STOP),
        group(r"debited\s+from\s+([^.\n]+?)" + _STOP),
        rule(r"(?:ATM|withdrawn)\s+(?:at\s+)?([^.\n]+?)(?:\s+on|\s+Ref|$)", lambda m: "ATM - " + m.group(1).strip()),
        label(r"\batm\b|withdrawn", "ATM"),
        group(r"towards\s+([^.\n]+?)" + _STOP, requires=(re.compile(r"^(?![\s\S]*mandate)"),)),
        group(r"\bto\s+([^.\n]+?)" + _STOP),
        group(r"\bfrom\s+([^.\n]+?)" + _STOP),
    )

    ACCOUNT = Cascade(
        group(r"A/c\s*(?:XX|X\*+)?(\d{4})"),
        group(r"(?:Account|A/c)\s+ending\s+(\d{4})"),
        group(r"A/c\s+No\.?\s*(?:XX|X\*+)?(\d{4})"),
    )

    REFERENCE = Cascade(
        group(r"Ref\s+No\.?\s*(\d+)"),
        group(r"Reference[:\s]+(\w+)"),
        group(r"Txn\s*(?:ID|#)[:\s]*(\w+)"),
        group(r"UPI[:\s]+(\d+)"),
    )

    BALANCE = Cascade(
        amount(r"\bBal[:\s]+Rs\.?\s*" + NUMBER),
        amount(r"Available\s+Balance[:\s]+Rs\.?\s*" + NUMBER),
        amount(r"Avl\s+Bal[:\s]+Rs\.?\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "Bank of India"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "will be" in lower:
            return False
        if "call" in lower and "if not done by you" in lower:
            if contains_any(lower, ("debited", "credited", "withdrawn", "transferred")):
                return True
        return super().is_transaction_message(message)
