"""Notices that look like transactions but are not.

E-mandate creation, future-debit reminders and balance-only pings mention
amounts and accounts without any money having moved. Regions use the
recognizers here to keep them out of the transaction stream, and the
parsers below turn them into the smaller ``MandateInfo`` and
``BalanceUpdateInfo`` records instead.
"""
import re
from datetime import datetime
from typing import Optional

from smsledger.cascade import Cascade, amount, contains_any, group
from smsledger.compiled_patterns import CompiledPatterns
from smsledger.constants import Constants
from smsledger.logging_setup import get_logger
from smsledger.mandate_info import BalanceUpdateInfo, MandateInfo

logger = get_logger(__name__)

E_MANDATE_CUES = ("e-mandate", "emandate", "upi-mandate", "upi mandate", "si mandate")
MANDATE_CREATED_CUES = ("successfully created", "created successfully", "successfully registered", "has been registered")
FUTURE_DEBIT_CUES = ("will be debited", "will be deducted", "mandate set for", "scheduled for debit", "due for auto-debit")

BALANCE_KEYWORDS = (
    "available bal", "avl bal", "avl. bal", "avail bal", "account balance", "a/c balance",
    "updated balance", "closing balance", "ledger balance", "current balance", "your balance",
    "balance is", "clear bal",
)
TRANSACTION_VERBS = (
    "debited", "credited", "withdrawn", "deposited", "spent", "received", "transferred",
    "paid", "sent", "charged", "deducted", "payment of", "purchase",
)

MANDATE_AMOUNT = Cascade(
    amount(CompiledPatterns.Amount.INR_PATTERN),
    amount(CompiledPatterns.Amount.RS_PATTERN),
    amount(CompiledPatterns.Amount.RUPEE_SYMBOL_PATTERN),
)

MANDATE_MERCHANT = Cascade(
    group(r"towards\s+([^.\n]+?)(?:\s+from|\s+A/c|\s+UMRN|\s+UMN|\s+ID:|\s+Alert:|\s*\.|$)"),
    group(r"For\s+([^\n]+?)\s+mandate"),
    group(r"\bfor\s+(?!Rs|INR|\d)([^.\n]+?)(?:\s+ID:|\s+Act:|\s+on\s+\d|\s+UMN|\s*\.|$)"),
    group(r"Info:\s*([^.\n]+?)\s*$"),
)

MANDATE_DATE = Cascade(
    group(
        r"(?:on|for|from|by)\s+("
        + CompiledPatterns.Date.DD_MMM_YY.pattern + "|"
        + CompiledPatterns.Date.DD_MM_YYYY.pattern + "|"
        + CompiledPatterns.Date.DD_MM_YY.pattern + "|"
        + CompiledPatterns.Date.DD_MM_YYYY_DASH.pattern + ")"
    ),
)

UMN = Cascade(
    group(r"\bUMN[:\s]+([^.\s]+)"),
    group(r"\bUMRN[:\s]+([^.\s]+)"),
)

UNKNOWN_SUBSCRIPTION = "Unknown Subscription"


def is_e_mandate_notification(message: str) -> bool:
    lower = message.lower()
    if contains_any(lower, E_MANDATE_CUES):
        return True
    return "mandate" in lower and contains_any(lower, MANDATE_CREATED_CUES)


def is_future_debit_notification(message: str) -> bool:
    lower = message.lower()
    if contains_any(lower, FUTURE_DEBIT_CUES):
        return True
    return "upcoming" in lower and "mandate" in lower


def is_balance_update_notification(message: str) -> bool:
    lower = message.lower()
    return contains_any(lower, BALANCE_KEYWORDS) and not contains_any(lower, TRANSACTION_VERBS)


def month_number(abbreviation: str) -> Optional[int]:
    return Constants.Months.ABBREVIATIONS.get(abbreviation[:3].upper())


def date_format_of(date_str: str) -> str:
    """Issuer date format of a mandate date, in the ``dd/MM/yy`` notation."""
    separator = "-" if "-" in date_str else "/"
    day, month, year = re.split(r"[-/]", date_str)
    month_part = "MMM" if month.isalpha() else "MM"
    year_part = "yyyy" if len(year) == 4 else "yy"
    return separator.join(("dd", month_part, year_part))


def parse_date(date_str: str) -> Optional[datetime]:
    """Parse ``05-Jan-25``, ``05/01/2025``, ``5 Jan 2025`` and similar."""
    parts = re.split(r"[-/ ]", date_str.strip())
    if len(parts) != 3:
        return None
    day, month, year = parts
    if month.isalpha():
        month_value = month_number(month)
    elif month.isdigit():
        month_value = int(month)
    else:
        month_value = None
    if month_value is None or not day.isdigit() or not year.isdigit():
        return None
    year_value = int(year)
    if year_value < 100:
        year_value += 2000
    try:
        return datetime(year_value, month_value, int(day))
    except ValueError:
        return None


def parse_as_of_date(message: str) -> Optional[datetime]:
    match = CompiledPatterns.Date.AS_OF.search(message)
    if match is None:
        return None
    return parse_date(match.group(1))


def parse_mandate_subscription(parser, message: str) -> Optional[MandateInfo]:
    if not parser.is_mandate_notification(message):
        return None

    mandate_amount = MANDATE_AMOUNT(message)
    if mandate_amount is None:
        logger.debug("%s: mandate notice without an amount", parser.get_bank_name())
        return None

    merchant = MANDATE_MERCHANT(
        message,
        transform=parser.clean_merchant_name,
        accept=parser.is_valid_merchant_name,
    )
    date_str = MANDATE_DATE(message)

    return MandateInfo(
        amount=mandate_amount,
        next_deduction_date=date_str,
        merchant=merchant if merchant is not None else UNKNOWN_SUBSCRIPTION,
        umn=UMN(message),
        date_format=date_format_of(date_str) if date_str else "dd-MMM-yy",
    )


def parse_balance_update(parser, message: str) -> Optional[BalanceUpdateInfo]:
    if not parser.is_balance_update_notification(message):
        return None

    balance = parser.extract_balance(message)
    if balance is None:
        return None

    return BalanceUpdateInfo(
        bank_name=parser.get_bank_name(),
        account_last4=parser.extract_account_last4(message),
        balance=balance,
        as_of_date=parse_as_of_date(message),
    )
