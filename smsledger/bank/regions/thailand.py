from decimal import Decimal
from typing import Optional, Sequence

from smsledger.bank.regions.region import Region
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, when
from smsledger.transaction_type import TransactionType


class ThaiRegion(Region):
    """Thai banks mix Thai and English in the same message.

    Amounts come as ``1,250.00 บาท`` or ``THB 1,250.00``; most messages
    carry the remaining balance (``คงเหลือ``) right after the movement.
    """

    OTP_PHRASES = ("otp", "รหัส", "ยืนยัน")
    PROMO_PHRASES = ("สมัคร", "โปรโมชั่น", "promotion", "cashback offer")
    TRANSACTION_VERBS = (
        # Thai
        "เงินเข้า", "เงินออก", "ถอนเงิน", "โอนเงิน", "ใช้จ่าย",
        "เงินฝาก", "รับเงิน", "คงเหลือ", "บาท", "ยอดใช้จ่าย",
        # English
        "withdrawal", "deposit", "transfer", "payment", "spent",
        "receive", "bal", "thb", "card transaction", "card payment",
        "credit card spending", "available limit",
    )
    CARD_CUES = (
        "credit card", "บัตรเครดิต", "card spending", "card payment",
        "card transaction", "ใช้จ่ายบัตร", "ยอดใช้จ่าย",
    )
    STOP_WORDS = Region.STOP_WORDS | {"ผ่าน", "โดย", "จาก", "ที่", "ไปยัง", "ถึง"}

    TYPES = DecisionTable(
        when(TransactionType.CREDIT, "credit card spending", "ยอดใช้จ่ายต่างประเทศ", "ยอดใช้จ่าย"),
        when(
            TransactionType.EXPENSE,
            "เงินออก", "ถอนเงิน", "ถอนเงินสด", "โอนเงินออก", "โอนเงินผ่าน", "ใช้จ่ายบัตร", "ใช้จ่าย",
            "withdrawal", "payment", "you spent", "transfer out", "card payment", "card transaction",
            "atm withdrawal",
        ),
        when(
            TransactionType.INCOME,
            "เงินเข้า", "เงินฝาก", "รับเงิน", "โอนเงินเข้า", "รับเงินพร้อมเพย์", "รับเงินโอน", "เงินฝากเข้า",
            "deposit", "receive", "transfer in", "transfer received",
        ),
    )

    THAI_AMOUNTS = Cascade(
        amount(NUMBER + r"\s*(?:THB|บาท)"),
        amount(r"(?:THB|฿)\s*" + NUMBER),
        # International card spend
        amount(NUMBER + r"\s*USD"),
    )
    THAI_BALANCES = Cascade(
        amount(r"(?:Bal|คงเหลือ)\s*" + NUMBER + r"\s*(?:THB|บาท)"),
        amount(r"(?:Bal|คงเหลือ)\s*" + NUMBER),
    )
    THAI_LIMITS = Cascade(
        amount(r"(?:Available limit|วงเงินคงเหลือ)\s*" + NUMBER + r"\s*(?:THB|บาท)"),
    )
    THAI_ACCOUNT = Cascade(group(r"(?:A/C|บช\.?)\s*[xX*]+(\d{4})"))
    MERCHANT = Cascade(
        group(r"(?:\bat|ร้าน)\s+([A-Za-z0-9\s&._-]+?)(?=\s+(?:A/C|บช|Bal|คงเหลือ|Available|on)\b|$)"),
        group(r"(?:\bat|ร้าน)\s+([A-Za-z0-9\s&._-]+)$"),
    )

    def __init__(self):
        super().__init__("THB")

    def is_transaction_message(self, message: str, verbs: Sequence[str] = ()) -> bool:
        lower = message.lower()
        if contains_any(lower, self.OTP_PHRASES) or contains_any(lower, self.PROMO_PHRASES):
            return False
        return contains_any(lower, self.TRANSACTION_VERBS) or contains_any(lower, verbs)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.THAI_AMOUNTS(message)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.THAI_BALANCES(message)

    def extract_available_limit(self, message: str) -> Optional[Decimal]:
        return self.THAI_LIMITS(message)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.THAI_ACCOUNT(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return None

    def extract_currency(self, message: str) -> Optional[str]:
        if "USD" in message and "THB" not in message and "บาท" not in message:
            return "USD"
        return None

    def detect_is_card(self, message: str) -> bool:
        return contains_any(message.lower(), self.CARD_CUES)

    def clean_merchant_name(self, merchant: str) -> str:
        return merchant.strip()

    def is_balance_update_notification(self, message: str) -> bool:
        return False


THAILAND = ThaiRegion()
