from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.regions.region import ascii_fold
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, amount, group, label
from smsledger.parsed_transaction import ParsedTransaction


class PNBBankParser(BankParser):
    """
    Parser for Punjab National Bank (PNB) SMS messages.
    """

    region = INDIA
    senders = Senders(
        exact=("PNBBNK", "PNB"),
        contains=("PUNJAB NATIONAL BANK", "PNBBNK", "PUNBN"),
        dlt_codes=("PNBBNK", "PNB"),
    )

    EXTRA_VERBS = ("register for e-statement",)

    AMOUNT = Cascade(
        amount(r"debited\s+(?:Rs\.?|INR)\s*" + NUMBER),
        amount(r"(?:Rs\.?|INR)\s*" + NUMBER + r"\s+(?:has\s+been\s+)?credited"),
        amount(r"credited\s+(?:Rs\.?|INR)\s*" + NUMBER),
    )

    MERCHANT = Cascade(
        group(r"\bFrom\s+([^/]+)/"),
        label(r"\bneft\b", "NEFT Transfer"),
        label(r"\bupi\b", "UPI Transaction"),
    )

    ACCOUNT = Cascade(group(r"A/c\s+(?:XX|X\*+)?(\d{4})"))

    REFERENCE = Cascade(
        group(r"ref\s+no\.\s+([A-Z0-9]+)"),
        group(r"UPI:\s*(\d+)"),
    )

    BALANCE = Cascade(amount(r"\bBal\s+(?:INR\s+|Rs\.?)" + NUMBER))

    def get_bank_name(self) -> str:
        return "Punjab National Bank"

    def parse(self, sms_body: str, sender: str, timestamp: int) -> Optional[ParsedTransaction]:
        return super().parse(ascii_fold(sms_body), sender, timestamp)
