from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, amount, group, label


class JupiterBankParser(BankParser):
    """
    Parser for Jupiter (CSB Bank partner) SMS messages.

    Jupiter's Edge RuPay credit card and its UPI rails rarely name a
    counterpart, so the merchant falls back to the channel.
    """

    region = INDIA
    senders = Senders(dlt_codes=("JTEDGE",))

    AMOUNT = Cascade(amount(r"\bRs\.?\s*" + NUMBER + r"\s+(?:debited|credited)"))

    MERCHANT = Cascade(
        label(r"edge csb bank rupay credit card|jupiter csb edge|credit card", "Credit Card Payment"),
        label(r"\bupi\b", "UPI Transaction"),
    )

    ACCOUNT = Cascade(group(r"ending\s+(\d{4})"))

    REFERENCE = Cascade(group(r"UPI\s+Ref\s+no\.?\s*([A-Za-z0-9]+)"))

    def get_bank_name(self) -> str:
        return "Jupiter"

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return super().extract_merchant(message, sender) or "Jupiter Transaction"
