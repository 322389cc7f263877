from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class TTBBankParser(BankParser):
    """
    TTB (TMBThanachart Bank) parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("TTB",), contains=("TMB",))

    def get_bank_name(self) -> str:
        return "TTB"
