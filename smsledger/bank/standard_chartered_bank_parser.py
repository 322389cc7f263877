import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType

_NOT_DESTINATIONS = ("your", "account", "iban", "acct")


def _destination(match) -> Optional[str]:
    """Payee of a Pakistani transfer: a short name, or a masked account."""
    target = match.group(1)
    if target.lower() in _NOT_DESTINATIONS:
        return None
    if set(target) == {"*"}:
        return "Transfer"
    if target.startswith("****"):
        return "Transfer to " + target[-4:]
    if 3 <= len(target) <= 8:
        return target if any(c.isalpha() for c in target) else "Transfer to " + target
    return "Transfer"


def _account_digits(match) -> Optional[str]:
    digits = re.sub(r"\D", "", match.group(0))
    if len(digits) >= 4:
        return digits[-4:]
    return None


def _short_account_digits(match) -> Optional[str]:
    digits = re.sub(r"\D", "", match.group(0))
    if len(digits) >= 4:
        return digits[-4:]
    return digits[-2:] if len(digits) >= 2 else None


class StandardCharteredBankParser(BankParser):
    """
    Parser for Standard Chartered Bank SMS messages (India and Pakistan).

    Indian alerts are rupee NEFT/UPI notices. Pakistani ones quote PKR and
    cover RAAST/IBFT transfers, financing repayments and card spends.
    """

    region = INDIA
    senders = Senders(
        exact=("9220",),
        contains=("SCBANK", "STANCHART", "STANDARDCHARTERED", "STANDARD CHARTERED"),
        dlt_codes=("SCBANK",),
    )

    EXTRA_VERBS = (
        "is debited for", "is credited for", "neft credit", "rtgs credit", "imps credit",
        "withdrawn from account", "cash withdrawal transaction", "paid at", "payment of",
        "transaction of pkr", "sent to scb pk", "electronic funds transfer", "has been credited",
    )

    AMOUNT = Cascade(
        amount(r"PKR\s+" + NUMBER),
        amount(r"\bUSD\s+" + NUMBER),
        amount(r"is\s+debited\s+for\s+Rs\.\s*" + NUMBER),
        amount(r"(?:NEFT|RTGS|IMPS)\s+credit\s+of\s+INR\s+" + NUMBER),
        amount(r"is\s+credited\s+for\s+Rs\.\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "payment of", all_of=("financing",)),
        when(TransactionType.EXPENSE, "transaction of pkr", all_of=("using online banking",)),
        when(TransactionType.EXPENSE, "withdrawn from account", "cash withdrawal transaction", "paid at"),
        when(TransactionType.TRANSFER, "transaction of pkr", all_of=("to",)),
        when(TransactionType.INCOME, "sent to scb pk", "has been credited"),
        when(TransactionType.INCOME, "electronic funds transfer", all_of=("into your account",)),
        when(TransactionType.EXPENSE, "is debited for"),
        when(TransactionType.INCOME, "neft credit", "rtgs credit", "imps credit", "is credited for"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        label(r"sent\s+to\s+scb\s+pk", "RAAST Transfer"),
        label(r"financing\s+facility", "Financing Payment"),
        label(r"withdrawn|cash\s+withdrawal", "ATM Cash Withdrawal"),
        rule(r"and\s+credited\s+to\s+a/c\s+([X*]+\d+)", lambda m: "UPI Transfer to " + m.group(1), final=True),
        label(r"neft\s+credit", "NEFT Credit"),
        label(r"rtgs\s+credit", "RTGS Credit"),
        label(r"imps\s+credit", "IMPS Credit"),
        group(r"paid\s+at\s+([A-Za-z0-9\s.\-]+?)\s+on"),
        rule(r"\bto\s+([A-Za-z0-9*]+)(?:\s|$)", _destination),
        group(
            r"from\s+account\s+[A-Za-z0-9\-*xX]+\s+([A-Z][A-Za-z0-9\s]+?)(?:\s+from\s+IBFT|\s+via|\s+on|\s*$)"
        ),
        label(r"from\s+account\s+[A-Za-z0-9\-*xX]+", "IBFT Transfer"),
        label(r"raast", "RAAST Transfer"),
        label(r"ibft|electronic\s+funds\s+transfer", "IBFT Transfer"),
    )

    ACCOUNT = Cascade(
        group(r"Your\s+a/c\s+[X*]+(\d{4})"),
        group(r"in\s+your\s+account\s+(?:\d+[xX*]+)?(\d{4})"),
        group(r"(?:A/C\s*[*Xx]+|Account\s+No\.\s*[0-9Xx*]+|Acc\.\s+Number\s*[0-9Xx*]+|Iban\.\s*[*Xx]+)(\d{4})"),
        group(r"card\s+no\.?\s*[0-9Xx*\s-]*?(\d{4})(?![0-9Xx])"),
        rule(r"your\s+account\s+[0-9\-*xX]+", _account_digits),
        rule(r"account\s+[0-9\-*xX]+", _short_account_digits),
    )

    BALANCE = Cascade(
        amount(r"Available\s+Balance:\s*INR\s+" + NUMBER),
        amount(r"Avail\s+Limit\s*PKR\s*" + NUMBER),
    )

    REFERENCE = Cascade(
        group(r"UPI\s+Ref\s+no\s+(\d+)"),
        group(r"TX\s+ID\s+([A-Z0-9]+)"),
        group(r"Transaction\s+ID:([A-Z0-9\-]+)"),
    )

    def get_bank_name(self) -> str:
        return "Standard Chartered Bank"

    def extract_currency(self, message: str) -> Optional[str]:
        lower = message.lower()
        if "pkr" in lower:
            return "PKR"
        if "usd" in lower:
            return "USD"
        return super().extract_currency(message)
