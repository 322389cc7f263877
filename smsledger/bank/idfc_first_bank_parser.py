from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _suffix(match):
    digits = match.group(1)
    return digits[-4:] if len(digits) >= 4 else digits


class IDFCFirstBankParser(BankParser):
    """
    Parser for IDFC First Bank SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("IDFCBK", "IDFCFB", "IDFC"))

    EXTRA_VERBS = ("debit", "interest")

    AMOUNT = Cascade(
        amount(r"\b[A-Z]{3}\s+" + NUMBER + r"\s+spent"),
        amount(r"Debit\s+Rs\.?\s*" + NUMBER),
        amount(r"(?:debited|credited)\s+by\s+(?:Rs\.?|INR)\s*" + NUMBER),
        amount(r"credited\s+with\s+INR\s*" + NUMBER),
        amount(r"interest\s+of\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debited", "debit", "spent", "withdrawn", "withdrawal"),
        when(TransactionType.INCOME, "credited", "deposited", "deposit"),
        when(TransactionType.INCOME, "interest", all_of=(("earned", "monthly interest"),)),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        label(r"monthly\s+interest", "Interest Credit"),
        rule(r"cash\s+deposit.*?ATM\s+(?:ID\s+)?([A-Z0-9]+)", lambda m: "Cash Deposit - ATM " + m.group(1)),
        label(r"cash\s+deposit", "Cash Deposit"),
        group(r";\s*([A-Z][A-Z0-9\s]+?)\s+credited"),
        rule(r"(?:to|from|at)\s+([\w.-]+@[a-zA-Z0-9]+)", lambda m: "UPI - " + m.group(1)),
        label(r"\bUPI\b", "UPI Transaction"),
        rule(r"IMPS.*?mobile\s+X*(\d{3,4})", lambda m: "IMPS Transfer - Mobile XXX" + m.group(1)),
        label(r"\bIMPS\b", "IMPS Transfer"),
        label(r"\bNEFT\b", "NEFT Transfer"),
        label(r"\bRTGS\b", "RTGS Transfer"),
        rule(r"\bATM\s+([A-Z]{2}\d+)", lambda m: "ATM - " + m.group(1)),
        label(r"\bATM\b", "ATM Transaction"),
        group(r"(?:to|at|for)\s+([A-Z][A-Z0-9\s&.-]+?)(?:\s+on|\s+New|\.|,|$)"),
    )

    ACCOUNT = Cascade(
        group(r"Credit\s+Card\s+ending\s+X*(\d{4})"),
        rule(r"A/C\s+X*(\d{3,4})", _suffix),
    )

    BALANCE = Cascade(
        amount(r"New\s+Bal\s*:\s*(?:INR|Rs\.?)\s*" + NUMBER),
        amount(r"(?:New|Updated)\s+balance\s+is\s+INR\s*" + NUMBER),
        amount(r"Available\s+balance\s+Rs\.?\s*" + NUMBER),
    )

    REFERENCE = Cascade(
        group(r"RRN\s+(\d+)"),
        group(r"IMPS\s+Ref\s+no\s+(\d+)"),
        group(r"UPI[:/]\s*(\d+)"),
        group(r"(?:txn|transaction)\s*(?:id|ref|no)[:\s]*([A-Z0-9]+)"),
    )

    def get_bank_name(self) -> str:
        return "IDFC First Bank"
