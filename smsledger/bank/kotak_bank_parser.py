import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType

# UPI handle suffix -> app or bank behind it
BANK_CODE_MAP = {
    "okaxis": "Axis Bank", "okbizaxis": "Axis Bank Business",
    "okhdfcbank": "HDFC Bank", "okicici": "ICICI Bank", "oksbi": "State Bank of India",
    "paytm": "Paytm", "ybl": "PhonePe", "amazonpay": "Amazon Pay",
    "googlepay": "Google Pay", "airtel": "Airtel Money", "freecharge": "Freecharge",
    "mobikwik": "MobiKwik", "jupiteraxis": "Jupiter", "razorpay": "Razorpay",
    "bharatpe": "BharatPe",
}

PAYMENT_APP_PREFIXES = (
    "paytmqr", "phonepeqr", "phonepe.qr", "gpay", "amazonpayqr",
    "bhimqr", "bharatpeqr", "freechargeqr", "mobikwikqr",
)

_UPI_CARD_PREFIX = re.compile(r"^UPI-\d+-", re.IGNORECASE)


def is_payment_app_id(name: str) -> bool:
    """QR and app-generated handles that say nothing about the payee."""
    if name.lower().startswith(PAYMENT_APP_PREFIXES):
        return True
    return len(name) > 20 and any(c.isalpha() for c in name) and any(c.isdigit() for c in name)


def upi_payee(match) -> Optional[str]:
    upi_id = match.group(1).strip()
    name, _, code = upi_id.partition("@")
    if name.lower().startswith("upi"):
        return name[3:] or None
    if is_payment_app_id(name):
        return BANK_CODE_MAP.get(code.lower(), name)
    if name.isdigit():
        return BANK_CODE_MAP.get(code.lower(), name)
    return name or None


class KotakBankParser(BankParser):
    """Kotak Bank specific parser.

    UPI alerts name the counterpart only by VPA; app-generated handles
    (``paytmqr...@paytm``) are replaced by the app behind the handle.
    """

    region = INDIA
    senders = Senders(dlt_codes=("KOTAKB",))

    EXTRA_VERBS = ("sent",)

    TYPES = DecisionTable(
        when(TransactionType.CREDIT, "avl limit", "avl lmt"),
        when(TransactionType.CREDIT, "credit card", all_of=(("spent", "debited"),)),
        when(TransactionType.EXPENSE, "sent", all_of=("from kotak",)),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        rule(
            r"\bon\s+\d{1,2}-\w{3}-\d{2,4}\s+at\s+([^.]+?)(?:\.|Avl|$)",
            lambda m: _UPI_CARD_PREFIX.sub("", m.group(1).strip()),
        ),
        rule(r"\bto\s+(\S+@\S+)\s+on\b", upi_payee),
        rule(r"\bfrom\s+(\S+@\S+)\s+on\b", upi_payee),
    )

    REFERENCE = Cascade(group(r"UPI\s+Ref\s+(\d+)"))

    ACCOUNT = Cascade(
        group(r"Credit\s+Card\s+[xX*]*(\d{4})"),
        group(r"\bAC\s+[X*]*(\d{4})(?:\s|,|\.)"),
    )

    LIMIT = Cascade(
        amount(r"Avl\s+(?:limit|Lmt):?\s*INR\s+" + NUMBER),
        amount(r"Available\s+limit:?\s*INR\s+" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "Kotak Bank"
