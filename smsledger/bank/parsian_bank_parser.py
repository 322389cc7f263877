from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import IRAN
from smsledger.bank.senders import Senders


class ParsianBankParser(BankParser):
    """
    Parsian Bank parser for Iranian banking SMS messages.
    """

    region = IRAN
    senders = Senders(exact=("PARSIANBANK", "PARSIAN", "PARSIAN BANK", "PERSIANBANK", "PERSIAN"))

    def get_bank_name(self) -> str:
        return "Parsian Bank"
