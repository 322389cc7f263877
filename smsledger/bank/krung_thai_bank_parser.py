from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class KrungThaiBankParser(BankParser):
    """
    Krungthai Bank (KTB) parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("KTB",), contains=("KRUNGTHAI", "KRUNG THAI"))

    def get_bank_name(self) -> str:
        return "Krungthai Bank"
