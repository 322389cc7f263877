from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.regions.region import last4
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _dividend(match):
    return match.group(1).strip() + " Dividend"


class ICICIBankParser(BankParser):
    """
    Parser for ICICI Bank SMS messages.

    Credit-card spends can post in a foreign currency ("USD 12.00 spent
    using ICICI Bank Card"); the ISO code is carried on the record. AutoPay
    debits are mapped to the subscription they pay for.
    """

    region = INDIA
    senders = Senders(exact=("ICICIB", "ICICIBANK"), contains=("ICICI",), dlt_codes=("ICICIB", "ICICI"))

    EXTRA_VERBS = ("debited with", "debited for", "credited with", "credited:", "autopay", "your account has been", "spent using")
    NOT_TRANSACTIONS = ("is due by", "will be debited", "has been received on your icici bank credit card")

    AMOUNT = Cascade(
        amount(r"\b[A-Z]{3}\s+" + NUMBER + r"\s+spent"),
        amount(r"(?:Rs\.?|INR)\s+" + NUMBER + r"\s+spent"),
        amount(r"(?:debited|credited)\s+(?:with|for)\s+Rs\.?\s*" + NUMBER),
        amount(r"credited:\s*Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.CREDIT, "icici bank credit card", all_of=(("spent", "debited"),)),
        when(TransactionType.CREDIT, "icici bank card", all_of=("spent",)),
        when(TransactionType.INCOME, "info by cash"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        label(r"Info\s+INF\*[^*]+\*[^*]*SAL", "Salary"),
        label(r"nfs\s?\*?cash wdl|cash wdl|nfscash", "Cash Withdrawal"),
        group(r"\bon\s+\d{1,2}-\w{3}-\d{2}\s+(?:at|on)\s+([^.]+?)(?:\.|\s+Avl|$)"),
        rule(r"Info\s+N?ACH\*([^*]+)\*", _dividend),
        group(r"towards\s+([^.\n]+?)\s+for"),
        group(r"\bfrom\s+([^.\n]+?)\.\s*UPI"),
        group(r";\s*([^.\n]+?)\s+credited\.\s*UPI"),
        label(r"info by cash", "Cash Deposit"),
        label(r"google play", "Google Play Store", requires=("autopay",)),
        label(r"netflix", "Netflix", requires=("autopay",)),
        label(r"spotify", "Spotify", requires=("autopay",)),
        label(r"amazon prime", "Amazon Prime", requires=("autopay",)),
        label(r"disney|hotstar", "Disney+ Hotstar", requires=("autopay",)),
        label(r"youtube", "YouTube Premium", requires=("autopay",)),
        label(r"autopay", "AutoPay Subscription"),
    )

    ACCOUNT = Cascade(
        rule(r"ICICI\s+Bank\s+Card\s+([X*]*\d+)", last4),
        group(r"ICICI\s+Bank\s+Credit\s+Card\s+[X*]*(\d{4})"),
        rule(r"ICICI\s+Bank\s+Account\s+([X*]*\d+)", last4),
        group(r"ICICI\s+Bank\s+Acc(?:t)?\s+[X*]*(\d{3,4})"),
        group(r"\bAcc(?:t)?\s+(?:XX|\*+)(\d{3,4})(?:\s|$|[,;.])"),
    )

    BALANCE = Cascade(
        amount(r"Available\s+Balance\s+is\s+Rs\.?\s*" + NUMBER),
        amount(r"Av[lb]\s+Bal\s+Rs\.?\s*" + NUMBER),
        amount(r"Updated\s+Bal[:\s]+Rs\.?\s*" + NUMBER),
    )

    REFERENCE = Cascade(
        group(r"\bRRN\s+([A-Za-z0-9]+)"),
        group(r"UPI:([A-Za-z0-9]+)"),
        group(r"transaction\s+reference\s+no\.?([A-Z0-9]+)"),
    )

    def get_bank_name(self) -> str:
        return "ICICI Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.NOT_TRANSACTIONS):
            return False
        if "cash deposit transaction" in lower and "has been completed" in lower:
            return False
        return super().is_transaction_message(message)
