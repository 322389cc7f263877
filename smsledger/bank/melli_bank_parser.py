from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import IRAN
from smsledger.bank.senders import Senders


class MelliBankParser(BankParser):
    """
    Bank Melli parser for Iranian banking SMS messages.
    """

    region = IRAN
    senders = Senders(exact=("+98700717", "MELLI", "MELLIBANK", "MELLI BANK", "BANK MELLI", "BANKMELLI"))

    def get_bank_name(self) -> str:
        return "Melli Bank"
