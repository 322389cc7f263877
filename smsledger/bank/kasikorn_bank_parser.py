from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class KasikornBankParser(BankParser):
    """
    Kasikorn Bank (KBank) parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("KBANK",), contains=("KASIKORN",))

    def get_bank_name(self) -> str:
        return "Kasikorn Bank"
