import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType

_ACH_PREFIX = re.compile(r"^ACH\s+(?:Credit|Debit):\s*", re.IGNORECASE)

# "for NEFT." style narrations that only name the channel
_CHANNELS = {
    "S.I": "Standing Instruction",
    "SI": "Standing Instruction",
    "NEFT": "NEFT Transfer",
    "RTGS": "RTGS Transfer",
    "IMPS": "IMPS Transfer",
}


def _narration(match):
    return _ACH_PREFIX.sub("", match.group(1).strip()).strip() or None


def _channel(match):
    name = match.group(1).strip().rstrip(".")
    return _CHANNELS.get(name.upper(), name)


class SaraswatBankParser(BankParser):
    """Saraswat Co-operative Bank: "A/c no. ending with ... is credited with INR ..."."""

    region = INDIA
    senders = Senders(exact=("SARBNK", "SARASWAT", "SARASWATBANK"), dlt_codes=("SARBNK", "SARASWAT"))

    EXTRA_VERBS = ("is credited with", "is debited with", "current bal is")

    AMOUNT = Cascade(
        amount(r"\bINR\s+" + NUMBER),
        amount(r"\bRs\.?\s*" + NUMBER),
    )

    # "towards ACH Credit:..." names the payer, it is not an investment
    DIRECTION = DecisionTable(
        when(TransactionType.INCOME, "is credited", "credited with"),
        when(TransactionType.EXPENSE, "is debited", "debited with", "withdrawn"),
    )

    TYPES = INDIA.TYPES

    MERCHANT = Cascade(
        rule(r"towards\s+(.+?)(?:\.\s*Current|\s*Current|$)", _narration),
        rule(r"\bfor\s+([A-Z.]+?)(?:\.\s+Current|\s+Current|$)", _channel),
        label(r"\batm\b|withdrawn", "ATM Withdrawal"),
    )

    ACCOUNT = Cascade(
        rule(r"A/c\s+no\.\s+(?:ending\s+with\s+)?(\d{4,6})", lambda m: m.group(1)[-4:]),
        rule(r"account\s+no\.\s+ending\s+with\s+(\d{4,6})", lambda m: m.group(1)[-4:]),
        group(r"A/c\s+\*(\d{4})"),
    )

    BALANCE = Cascade(
        amount(r"Current\s+Bal\s+is\s+INR\s+" + NUMBER),
        amount(r"\bBal[:\s]+Rs\.?\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "Saraswat Co-operative Bank"
