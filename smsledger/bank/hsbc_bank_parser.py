import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType

_TRAILING_AMOUNT = re.compile(r"\s+for\s+INR\s+[\d,]+(?:\.\d{2})?$", re.IGNORECASE)

# NEFT/RTGS/IMPS leg that lands in another bank's account. Only the bank
# name is checked, so a transfer to one's own account elsewhere also counts.
_TO_OTHER_BANK = re.compile(r"credited\s+to\s+the\s+(?!hsbc\b)\w+\s+a/c")
_TO_NAMED_PAYEE = re.compile(r"a/c\s+[x\d]+\s+of\s+\w+")


def _card_suffix(match):
    value = match.group(1)
    return value[-4:].lower() if len(value) >= 4 else value.lower()


class HSBCBankParser(BankParser):
    """
    Parser for HSBC Bank SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("HSBC", "HSBCIN"), dlt_codes=("HSBCIN", "HSBC"))

    EXTRA_VERBS = (
        "is paid from", "is credited to", "is debited", "used at", "thank you for using", "for inr", "account",
    )

    AMOUNT = Cascade(
        amount(r"INR\s+" + NUMBER + r"\s+is\s+(?:paid|credited|debited)"),
        amount(r"for\s+INR\s+" + NUMBER + r"\s+on"),
        amount(r"for\s+INR\s+" + NUMBER + r"(?:\s|$|\.)"),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "thank you for using", "for inr", all_of=("debit card",)),
        when(TransactionType.CREDIT, "creditcard", "credit card"),
        when(TransactionType.TRANSFER, _TO_OTHER_BANK, all_of=(("neft", "rtgs", "imps"),)),
        when(TransactionType.TRANSFER, _TO_NAMED_PAYEE, all_of=(("neft", "rtgs", "imps"), "credited to")),
        when(TransactionType.EXPENSE, "is paid from", "is debited"),
        when(TransactionType.INCOME, "is credited to", "is credited with", "deposited"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r"credited\s+to\s+the\s+\w+\s+A/c\s+[X\d]+\s+of\s+(.+?)\s+on\s+"),
        # Remitter is quoted with its masked account
        group(r"as\s+(?:NEFT|RTGS|IMPS)\s+from\s+(.+?)\s+\.", final=True),
        group(r"\bat\s+([^.]+?)\s*\."),
        group(r"used\s+at\s+(\S+)\s+for\s+INR"),
        group(r"\bto\s+([^.]+?)\s+on\s+\d"),
        group(r"\bfrom\s+([^.]+?)(?:\s+on\s+|\s+with\s+|$)"),
    )

    ACCOUNT = Cascade(
        rule(r"A/c\s+\d+-\d+\*+-(\d+)", lambda m: m.group(1).rjust(4, "0")),
        rule(r"Debit\s+Card\s+[X*]+(\d+[xX]*)", _card_suffix),
        group(r"credit\s*card\s+[xX*]+(\d{4})"),
        group(r"account\s+[X*]+(\d{4})"),
    )

    REFERENCE = Cascade(
        group(r"with\s+UTR\s+(\w+)"),
        group(r"with\s+ref\s+(\w+)"),
    )

    BALANCE = Cascade(
        amount(r"(?:Your\s+)?Avl\s+Bal\s+is\s+INR\s+" + NUMBER),
        amount(r"available\s+bal\s+is\s+INR\s+" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "HSBC Bank"

    def clean_merchant_name(self, merchant: str) -> str:
        return _TRAILING_AMOUNT.sub("", super().clean_merchant_name(merchant)).strip()
