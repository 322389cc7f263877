from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class SiamCommercialBankParser(BankParser):
    """
    Siam Commercial Bank (SCB) parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("SCB",), contains=("SIAM COMMERCIAL", "SIAMCOMMERCIAL"))

    def get_bank_name(self) -> str:
        return "Siam Commercial Bank"
