from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, amount, group


class IDBIBankParser(BankParser):
    """
    Parser for IDBI Bank SMS messages.
    """

    region = INDIA
    senders = Senders(exact=("IDBIBK", "IDBIBANK"), contains=("IDBIBK", "IDBIBANK", "IDBI"))

    AMOUNT = Cascade(amount(r"(?:debited|credited)\s+(?:with|for)\s+Rs\.?\s*" + NUMBER))

    MERCHANT = Cascade(
        group(r"towards\s+([^.\n]+?)\s+for\s+\w*MANDATE", requires=(("autopay", "mandate"),)),
        group(r"towards\s+([^.\n]+?)\s+for"),
        group(r";\s*([^.\n]+?)\s+credited\."),
    )

    ACCOUNT = Cascade(group(r"\bAcct\s+(?:XX|X\*+)?(\d{3,4})"))

    REFERENCE = Cascade(
        group(r"\bRRN\s+([A-Za-z0-9]+)"),
        group(r"UPI:([A-Za-z0-9]+)"),
    )

    BALANCE = Cascade(amount(r"\bBal\s+Rs\.?\s*" + NUMBER))

    def get_bank_name(self) -> str:
        return "IDBI Bank"
