import re
from decimal import Decimal
from typing import Optional, Sequence

from smsledger.bank.regions.region import Region
from smsledger.cascade import Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.transaction_type import TransactionType

# Persian and Arabic-Indic digits, Persian thousands separator
_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩٬", "01234567890123456789,")

_PERSIAN_NUMBER = r"(\d{1,3}(?:,\d{3})+|\d+)"

# Smaller figures are dates, times or card fragments, never a rial amount
MIN_RIAL_AMOUNT = Decimal(1000)


def normalize_digits(message: str) -> str:
    return message.translate(_DIGITS)


def _card_label(match) -> str:
    return "Card " + match.group(1)


class IranianRegion(Region):
    """Persian-script banking SMS, amounts in rials (or tomans)."""

    OTP_PHRASES = ("otp", "رمز یکبار مصرف", "کد تایید")
    PROMO_PHRASES = ("تبلیغ", "پیشنهاد", "تخفیف", "cashback offer")
    TRANSACTION_VERBS = (
        "مبلغ", "ریال", "تومان", "irr", "toman", "برداشت", "واریز", "پرداخت", "خرید", "انتقال",
        "debit", "credit", "spent", "received", "transferred", "paid",
    )
    CARD_CUES = ("کارت", "card", "debit card", "credit card", "کارت بدهی", "کارت اعتباری")
    STOP_WORDS = Region.STOP_WORDS | {"استفاده", "از", "توسط", "از طریق", "برای", "به", "در", "و", "با"}

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "برداشت", "پرداخت", "خرید", "انتقال", "مصرف"),
        when(TransactionType.INCOME, "واریز"),
        when(TransactionType.INCOME, "credited", unless=("block",)),
    )

    RIAL_AMOUNTS = Cascade(
        amount(r"مبلغ\s*" + _PERSIAN_NUMBER + r"\s*(?:ریال|تومان)"),
        amount(_PERSIAN_NUMBER + r"\s*(?:ریال|تومان)"),
        amount(r"مبلغ\s*:?\s*" + _PERSIAN_NUMBER),
    )
    RIAL_BALANCES = Cascade(amount(r"مانده\s*:?\s*" + _PERSIAN_NUMBER))
    CARD_MERCHANT = Cascade(rule(r"(\d{4}[-\s]?\d{4}[-\s]?\d{4}[-\s]?\d{4})", _card_label))
    PERSIAN_ACCOUNT = Cascade(
        group(r"(?:حساب|کارت|card|account)\D{0,12}?[\d*\-.]*(\d{4})(?!\d)"),
        group(r"\d{4}[-\s]\d{4}[-\s]\d{4}[-\s](\d{4})"),
    )

    def __init__(self):
        super().__init__("IRR")

    def is_transaction_message(self, message: str, verbs: Sequence[str] = ()) -> bool:
        lower = message.lower()
        if contains_any(lower, self.OTP_PHRASES) or contains_any(lower, self.PROMO_PHRASES):
            return False
        if "درخواست" in lower and "پرداخت" in lower:
            return False
        return contains_any(lower, self.TRANSACTION_VERBS) or contains_any(lower, verbs)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.RIAL_AMOUNTS(normalize_digits(message), accept=lambda value: value >= MIN_RIAL_AMOUNT)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.RIAL_BALANCES(normalize_digits(message))

    def extract_merchant(self, message: str, parser) -> Optional[str]:
        return self.CARD_MERCHANT(normalize_digits(message))

    def extract_reference(self, message: str) -> Optional[str]:
        return None

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.PERSIAN_ACCOUNT(normalize_digits(message))

    def extract_currency(self, message: str) -> Optional[str]:
        return None

    def detect_is_card(self, message: str) -> bool:
        return contains_any(message.lower(), self.CARD_CUES)

    def is_balance_update_notification(self, message: str) -> bool:
        return False


IRAN = IranianRegion()
