from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import SAUDI_ARABIA
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, amount, group, label, when
from smsledger.transaction_type import TransactionType

_SAR_NUMBER = r"([0-9]+(?:\.[0-9]{2})?)"


class AlinmaBankParser(BankParser):
    """
    Parser for Alinma Bank (Saudi Arabia) SMS messages.

    Alerts are in Arabic with ``label: value`` lines; the amount may be
    tagged either ``SAR`` or ``ريال سعودى``.
    """

    region = SAUDI_ARABIA
    senders = Senders(contains=("ALINMA", "الإنماء"))

    NOT_TRANSACTIONS = ("otp", "رمز", "كلمة المرور")
    KEYWORDS = ("شراء", "بمبلغ", "مبلغ", "الرصيد", "purchase", "pos")
    CARD_CUES = ("البطاقة", "بطاقة", "POS", "نقاط البيع")

    AMOUNT = Cascade(
        amount(r"بمبلغ:\s*" + _SAR_NUMBER + r"\s*SAR"),
        amount(r"مبلغ:\s*SAR\s*" + _SAR_NUMBER),
        amount(r"مبلغ:\s*ريال سعودى\s*" + _SAR_NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "شراء", "purchase"),
        when(TransactionType.INCOME, "إيداع", "deposit"),
    )

    MERCHANT = Cascade(
        group(r"من:\s*([^\n]+?)(?:\n|في:)"),
        group(r"لدى:\s*([^\n]+?)(?:\n|في:)"),
    )

    FALLBACK_MERCHANT = Cascade(label(r"\bpos\b|نقاط البيع", "POS Transaction"))

    ACCOUNT = Cascade(
        group(r"حساب:\s*\*+(\d{4})"),
        group(r"البطاقة(?: الائتمانية)?:\s*\*+(\d{4})"),
        group(r"بطاقة مدى:\s*(\d{4})\*"),
    )

    BALANCE = Cascade(
        amount(r"الرصيد:\s*" + _SAR_NUMBER + r"\s*SAR"),
        amount(r"الرصيد:\s*" + _SAR_NUMBER + r"\s*ريال"),
    )

    def get_bank_name(self) -> str:
        return "Alinma Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if any(k in lower for k in self.NOT_TRANSACTIONS):
            return False
        return any(k in lower for k in self.KEYWORDS)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        merchant = self.MERCHANT(message, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)
        return merchant or self.FALLBACK_MERCHANT(message)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.BALANCE(message)

    def detect_is_card(self, message: str) -> bool:
        return any(k in message for k in self.CARD_CUES)
