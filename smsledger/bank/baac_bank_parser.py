from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class BAACBankParser(BankParser):
    """
    Bank for Agriculture and Agricultural Cooperatives (BAAC) parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("BAAC",), contains=("AGRICULTURE",))

    def get_bank_name(self) -> str:
        return "BAAC"
