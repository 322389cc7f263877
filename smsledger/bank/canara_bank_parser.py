from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, amount, group, label


class CanaraBankParser(BankParser):
    """
    Parser for Canara Bank SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("CANBNK", "CANARA"))

    EXTRA_VERBS = ("paid thru",)

    AMOUNT = Cascade(
        amount(r"\bRs\.?\s*" + NUMBER + r"\s+paid"),
        amount(r"\bINR\s+" + NUMBER + r"\s+has\s+been\s+DEBITED"),
    )

    MERCHANT = Cascade(
        group(r"\sto\s+([^,]+?)(?:,\s*UPI|\.|-Canara)"),
        label(r"DEBITED", "Canara Bank Debit"),
    )

    ACCOUNT = Cascade(group(r"(?:account|A/C)\s+(?:XX|X\*+)?(\d{3,4})"))

    BALANCE = Cascade(amount(r"(?:Total\s+)?Avail\.?bal\s+INR\s+" + NUMBER))

    REFERENCE = Cascade(group(r"UPI\s+Ref\s+(\d+)"))

    def get_bank_name(self) -> str:
        return "Canara Bank"

    def is_transaction_message(self, message: str) -> bool:
        if "failed due to" in message.lower():
            return False
        return super().is_transaction_message(message)
