from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, amount, group, label, rule


class KarnatakaBankParser(BankParser):
    """
    Parser for Karnataka Bank SMS messages.
    """

    region = INDIA
    senders = Senders(
        exact=("KBLBNK", "KARBANK"),
        contains=("KARNATAKA BANK", "KARNATAKABANK", "KBLBNK", "KTKBANK", "KARBANK"),
    )

    AMOUNT = Cascade(
        amount(r"DEBITED\s+for\s+Rs\.?" + NUMBER),
        amount(r"credited\s+by\s+Rs\.?" + NUMBER),
    )

    MERCHANT = Cascade(
        group(r"ACH[A-Za-z]*-([^/]+)/"),
        group(r"\bfrom\s+(\S+)\s+on\b"),
        label(r"lic of india", "LIC of India"),
    )

    ACCOUNT = Cascade(
        rule(r"Account\s+[xX]*(\d{4,6})[xX]*", lambda m: m.group(1)[-4:]),
        rule(r"a/c\s+[xX]{0,2}(\d{4,6})", lambda m: m.group(1)[-4:]),
    )

    REFERENCE = Cascade(group(r"UPI\s+Ref\s+no\s+(\d+)"))

    BALANCE = Cascade(amount(r"Balance\s+is\s+Rs\.?" + NUMBER))

    def get_bank_name(self) -> str:
        return "Karnataka Bank"
