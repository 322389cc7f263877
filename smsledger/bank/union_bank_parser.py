import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, amount, group, label, rule

_BRANDS = (
    ("paytm", "Paytm"), ("phonepe", "PhonePe"), ("googlepay", "Google Pay"), ("gpay", "Google Pay"),
    ("bharatpe", "BharatPe"), ("amazon", "Amazon"), ("flipkart", "Flipkart"), ("swiggy", "Swiggy"),
    ("zomato", "Zomato"), ("uber", "Uber"), ("ola", "Ola"),
)


def vpa_payee(match) -> str:
    handle = match.group(1).strip().lower()
    for fragment, brand in _BRANDS:
        if fragment in handle:
            return brand
    if handle.isdigit():
        return "Individual"
    for part in re.split(r"[.\-_]", handle):
        if len(part) > 3 and not part.isdigit():
            return part.capitalize()
    return "Merchant"


def _without_balance(match):
    value = match.group(1)
    return None if "Avl" in value else value


class UnionBankParser(BankParser):
    """
    Parser for Union Bank of India SMS messages.
    """

    region = INDIA
    senders = Senders(
        contains=("UNIONB", "UNIONBANK", "UBOI"),
        dlt_codes=("UNIONB", "UNIONBANK"),
        patterns=(r"^[A-Z]{2}-UNIONB-[TPG]$",),
    )

    AMOUNT = Cascade(
        amount(r"Rs[:.]?\s*" + NUMBER),
        amount(r"INR\s+" + NUMBER),
    )

    MERCHANT = Cascade(
        label(r"Mob\s+Bk", "Mobile Banking Transfer", flags=0),
        group(r"\bat\s+([^.\s]+(?:\s+[^.\s]+)*?)(?:\s+on|\s+Avl|$)", requires=("atm",)),
        label(r"\bATM\b", "ATM Withdrawal"),
        group(r"UPI[/:]?\s*([^,.\s]+)"),
        rule(r"VPA\s+([^@\s]+)", vpa_payee),
        rule(r"\bto\s+([^.\n]+?)(?:\s+on|\s+Avl|$)", _without_balance),
        rule(r"\bfrom\s+([^.\n]+?)(?:\s+on|\s+Avl|$)", _without_balance),
    )

    REFERENCE = Cascade(
        group(r"ref\s+no\s+(\w+)"),
        group(r"\bref[:#]?\s*(\w+)"),
        group(r"reference[:#]?\s*(\w+)"),
        group(r"\btxn[:#]?\s*(\w+)"),
    )

    ACCOUNT = Cascade(
        group(r"A/c\s*[*X](\d{4})"),
        group(r"Account\s*[*X](\d{4})"),
        group(r"Acc\s*[*X](\d{4})"),
        group(r"A/c\s+(\d{4})"),
    )

    BALANCE = Cascade(
        amount(r"Avl\s+Bal\s+Rs[:.]?\s*" + NUMBER),
        amount(r"Available\s+Balance[:.]?\s*Rs[:.]?\s*" + NUMBER),
        amount(r"\bBal(?:ance)?[:.]?\s*Rs[:.]?\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "Union Bank of India"
