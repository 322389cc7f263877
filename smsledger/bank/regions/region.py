import re
import unicodedata
from decimal import Decimal
from typing import Optional, Sequence

from smsledger.bank import mandate
from smsledger.cascade import (
    NUMBER,
    Cascade,
    DecisionTable,
    amount,
    contains_any,
    group,
    rule,
    when,
    words,
)
from smsledger.compiled_patterns import CompiledPatterns
from smsledger.constants import Constants
from smsledger.mandate_info import BalanceUpdateInfo, MandateInfo
from smsledger.transaction_type import TransactionType

VERBS = r"(?:debited|credited|spent|withdrawn|paid|sent|received|transferred|deposited|deducted|charged)"

# "@ybl", "9876543210@paytm": a handle with nothing readable in front
_UNREADABLE_HANDLE = re.compile(r"^[\d\W_]*@")


def last4(match) -> Optional[str]:
    digits = re.sub(r"\D", "", match.group(1) or "")
    return digits[-4:] if len(digits) >= 3 else None


def ascii_fold(text: str) -> str:
    """Drop accents and stray non-ASCII glyphs some templates carry; keeps the rupee sign as "Rs."."""
    text = text.replace("₹", "Rs.")
    return "".join(c for c in unicodedata.normalize("NFKD", text) if ord(c) < 128)


def currency_prefix(currency: str) -> str:
    symbols = Constants.Currency.SYMBOLS.get(currency, (currency,))
    return r"(?<![A-Za-z])(?:" + "|".join(symbols) + ")"


def looks_like_date_or_reference(suffix: str, message: str) -> bool:
    """True when a 4-digit "account" is really a year or part of a reference number."""
    escaped = re.escape(suffix)

    date_shapes = (
        r"\d{1,2}[/-]\d{1,2}[/-]" + escaped + r"\b",
        r"\b" + escaped + r"[/-]\d{1,2}[/-]\d{1,2}",
        r"\d{1,2}[-\s][A-Za-z]{3}[-\s]" + escaped + r"\b",
    )
    if any(re.search(shape, message) for shape in date_shapes):
        return True

    for reference in re.finditer(r"(?:RRN|Ref)\s*(?:No\.?)?[:\s]*(\d{8,16})", message, re.IGNORECASE):
        if suffix in reference.group(1):
            return True

    if suffix.isdigit() and 2000 <= int(suffix) <= 2099:
        near_account = re.search(r"(?:A/c|Account|Acct|Card).{0,25}" + escaped, message, re.IGNORECASE)
        if near_account is None:
            return True

    return False


class Region:
    """English-language defaults every parser starts from.

    A parser holds one region object in its ``region`` attribute and the
    ``BankParser`` defaults delegate to it. Subclasses widen the vocabulary
    for one market. A region is configured in ``__init__`` and never
    changed afterwards, so one instance is shared by every parser of that
    market.
    """

    OTP_PHRASES = ("otp", "one time password", "one-time password", "verification code")
    PROMO_PHRASES = ("offer", "discount", "cashback offer", "win ")
    REQUEST_PHRASES = (
        "has requested", "payment request", "collect request", "requesting payment",
        "requests rs", "ignore if already paid", "have received payment",
    )
    REMINDER_PHRASES = (
        "is due", "min amount due", "minimum amount due", "in arrears", "is overdue",
        "ignore if paid", "will be debited", "will be credited", "will be deducted",
    )
    TRANSACTION_VERBS = (
        "debited", "credited", "withdrawn", "deposited", "spent", "received",
        "transferred", "paid", "charged", "deducted", "purchase",
    )

    INVESTMENT_KEYWORDS = words("mutual fund", "mutual funds", "stockbroker", "demat")

    CARD_LIMIT_CUES = (
        "avl limit", "avl lmt", "avl. limit", "avail limit", "available limit",
        "available credit limit", "credit card",
    )
    ACCOUNT_CUES = ("a/c", "account", "ac ", "acc ", "acct")
    CARD_CUES = (
        "card ending", "card xx", "debit card", "credit card", "card no.", "card number",
        "card *", "card x", "card **",
    )
    SPEND_VERBS = ("spent", "debited", "charged", "purchase", "used", "transaction", "txn")

    STOP_WORDS = frozenset({
        "USING", "VIA", "THROUGH", "BY", "WITH", "FOR", "TO", "FROM", "AT", "THE",
        "YOUR", "A/C", "ACCOUNT",
    })

    TYPES = DecisionTable(
        when(
            TransactionType.CREDIT, *CARD_LIMIT_CUES,
            all_of=(SPEND_VERBS,),
            unless=("credited", "refund", "revers", "bill", "payment received", "payment of"),
        ),
        when(TransactionType.EXPENSE, "debited", "withdrawn", "spent", "charged", "paid", "purchase", "deducted"),
        when(TransactionType.INCOME, "credited", "deposited", "received", "refund"),
        when(TransactionType.INCOME, "cashback", unless=("earn cashback",)),
    )

    MERCHANT = Cascade(
        group(CompiledPatterns.Merchant.TO_PATTERN),
        group(CompiledPatterns.Merchant.FROM_PATTERN),
        group(CompiledPatterns.Merchant.AT_PATTERN),
        group(CompiledPatterns.Merchant.FOR_PATTERN),
    )

    REFERENCE = Cascade(*(group(p) for p in CompiledPatterns.Reference.ALL_PATTERNS))

    ACCOUNT = Cascade(*(rule(p, last4) for p in CompiledPatterns.Account.ALL_PATTERNS))

    CLEANUPS = (
        CompiledPatterns.Cleaning.TRAILING_PARENTHESES,
        CompiledPatterns.Cleaning.REF_NUMBER_SUFFIX,
        CompiledPatterns.Cleaning.DATE_SUFFIX,
        CompiledPatterns.Cleaning.UPI_SUFFIX,
        CompiledPatterns.Cleaning.TIME_SUFFIX,
        CompiledPatterns.Cleaning.TRAILING_REFERENCE,
        CompiledPatterns.Cleaning.PVT_LTD,
        CompiledPatterns.Cleaning.LTD,
    )

    def __init__(self, currency: str = Constants.Currency.DEFAULT):
        self.currency = currency
        prefix = currency_prefix(currency)
        self.amounts = self.build_amount_cascade(prefix)
        self.balances = Cascade(
            amount(CompiledPatterns.Balance.KEYWORD + r".{0,40}?" + prefix + r"\s*" + NUMBER),
            amount(CompiledPatterns.Balance.KEYWORD + r"\s*(?:is|of|:|-)?\s*" + NUMBER),
        )
        self.limits = Cascade(
            amount(CompiledPatterns.Limit.KEYWORD + r"\s*(?:is|of|:|-)?\s*" + prefix + r"?\s*" + NUMBER),
            amount(r"(?:^|\s)Limit\s*:?\s*" + prefix + r"\s*" + NUMBER),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.currency!r})"

    def build_amount_cascade(self, prefix: str) -> Cascade:
        """Verb-adjacent amounts first, then any home-currency amount."""
        return Cascade(
            amount(prefix + r"\s*" + NUMBER + r"\s+(?:has\s+been\s+|is\s+|was\s+)?" + VERBS),
            amount(VERBS + r"\s+(?:with\s+|by\s+|for\s+|of\s+)?" + prefix + r"\s*" + NUMBER),
            amount(prefix + r"\s*" + NUMBER),
            amount(NUMBER + r"\s*" + prefix + r"(?![A-Za-z])"),
        )

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def is_excluded(self, lower: str) -> bool:
        return (
            contains_any(lower, self.OTP_PHRASES)
            or contains_any(lower, self.PROMO_PHRASES)
            or contains_any(lower, self.REQUEST_PHRASES)
            or contains_any(lower, self.REMINDER_PHRASES)
            or ("pls pay" in lower and "min of" in lower)
        )

    def is_transaction_message(self, message: str, verbs: Sequence[str] = ()) -> bool:
        lower = message.lower()
        if self.is_excluded(lower):
            return False
        return contains_any(lower, self.TRANSACTION_VERBS) or contains_any(lower, verbs)

    def is_investment_transaction(self, lower: str) -> bool:
        return self.INVESTMENT_KEYWORDS.search(lower) is not None

    def extract_transaction_type(self, message: str, parser) -> Optional[TransactionType]:
        if parser.is_investment_transaction(message.lower()):
            return TransactionType.INVESTMENT
        return self.TYPES(message)

    def detect_is_card(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.CARD_LIMIT_CUES):
            return True
        if contains_any(lower, self.ACCOUNT_CUES):
            return False
        if contains_any(lower, self.CARD_CUES):
            return True
        return "ending" in lower and CompiledPatterns.Account.MASKED.search(message) is not None

    # ------------------------------------------------------------------
    # Field extraction
    # ------------------------------------------------------------------
    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.amounts(message)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.balances(message)

    def extract_available_limit(self, message: str) -> Optional[Decimal]:
        return self.limits(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message, accept=lambda suffix: not looks_like_date_or_reference(suffix, message))

    def extract_merchant(self, message: str, parser) -> Optional[str]:
        return self.MERCHANT(
            message,
            transform=parser.clean_merchant_name,
            accept=parser.is_valid_merchant_name,
        )

    def extract_currency(self, message: str) -> Optional[str]:
        """ISO code written next to the first amount that carries one."""
        found = []
        for match in CompiledPatterns.Currency.CODE_BEFORE.finditer(message):
            if match.group(1) in Constants.Currency.KNOWN:
                found.append((match.start(), match.group(1)))
                break
        for match in CompiledPatterns.Currency.CODE_AFTER.finditer(message):
            if match.group(2) in Constants.Currency.KNOWN:
                found.append((match.start(), match.group(2)))
                break
        if not found:
            return None
        return min(found)[1]

    def clean_merchant_name(self, merchant: str) -> str:
        result = merchant
        for pattern in self.CLEANUPS:
            result = pattern.sub("", result)
        result = CompiledPatterns.Cleaning.TRAILING_PUNCTUATION.sub("", result)
        result = CompiledPatterns.Cleaning.LEADING_PUNCTUATION.sub("", result)
        return CompiledPatterns.Cleaning.WHITESPACE.sub(" ", result).strip()

    def is_valid_merchant_name(self, name: str) -> bool:
        return (
            len(name) >= Constants.Parsing.MIN_MERCHANT_NAME_LENGTH
            and any(c.isalpha() for c in name)
            and name.upper() not in self.STOP_WORDS
            and not name.isdigit()
            and _UNREADABLE_HANDLE.match(name) is None
            and CompiledPatterns.Cleaning.ACCOUNT_LIKE.search(name) is None
        )

    # ------------------------------------------------------------------
    # Notices
    # ------------------------------------------------------------------
    def is_mandate_notification(self, message: str) -> bool:
        return False

    def is_balance_update_notification(self, message: str) -> bool:
        return mandate.is_balance_update_notification(message)

    def parse_mandate_subscription(self, message: str, parser) -> Optional[MandateInfo]:
        return None

    def parse_balance_update(self, message: str, parser) -> Optional[BalanceUpdateInfo]:
        return mandate.parse_balance_update(parser, message)
