from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Tuple

from smsledger.bank.regions import GENERIC, Region
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable
from smsledger.logging_setup import get_logger
from smsledger.mandate_info import BalanceUpdateInfo, MandateInfo
from smsledger.parsed_transaction import ParsedTransaction
from smsledger.transaction_type import TransactionType

logger = get_logger(__name__)


class BankParser(ABC):
    """
    Base class for bank-specific message parsers.

    A concrete parser names its institution, lists its ``senders`` and sets
    ``region`` to the heuristics of its market. Each field has a class-level
    cascade (``AMOUNT``, ``MERCHANT``, ...) that is tried first; when it
    yields nothing the region's default runs. ``TYPES``, when set, replaces
    the region's transaction-type table. Parsers hold no state, so one
    instance serves every caller.
    """

    region: Region = GENERIC
    senders: Senders = Senders()

    AMOUNT = Cascade()
    MERCHANT = Cascade()
    REFERENCE = Cascade()
    ACCOUNT = Cascade()
    BALANCE = Cascade()
    LIMIT = Cascade()
    TYPES: Optional[DecisionTable] = None
    # Rows that settle the type before the investment keywords are consulted
    DIRECTION: Optional[DecisionTable] = None
    # Words that mark a transaction for this issuer on top of the region's
    EXTRA_VERBS: Tuple[str, ...] = ()

    @abstractmethod
    def get_bank_name(self) -> str:
        """Returns the name of the bank this parser handles."""
        ...

    def can_handle(self, sender: str) -> bool:
        """Checks if this parser can handle messages from the given sender."""
        return self.senders.matches(sender)

    def get_currency(self) -> str:
        return self.region.currency

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.get_bank_name()!r}>"

    # -------------------------------------------------------------------------
    # parse
    # -------------------------------------------------------------------------
    def parse(self, sms_body: str, sender: str, timestamp: int) -> Optional[ParsedTransaction]:
        """Parses an SMS message and extracts transaction information."""
        if not self.is_transaction_message(sms_body):
            logger.debug("%s: not a transaction message", self.get_bank_name())
            return None

        amount = self.extract_amount(sms_body)
        if amount is None:
            logger.debug("%s: no amount found", self.get_bank_name())
            return None

        txn_type = self.extract_transaction_type(sms_body)
        if txn_type is None:
            logger.debug("%s: transaction type not determined", self.get_bank_name())
            return None

        return self.build_transaction(sms_body, sender, timestamp, amount, txn_type)

    def build_transaction(
        self,
        sms_body: str,
        sender: str,
        timestamp: int,
        amount: Decimal,
        txn_type: TransactionType,
    ) -> ParsedTransaction:
        """Assembles the record once amount and type are known."""
        is_credit = txn_type is TransactionType.CREDIT
        from_account, to_account = self.extract_transfer_accounts(sms_body)

        return ParsedTransaction(
            amount=amount,
            type=txn_type,
            merchant=self.extract_merchant(sms_body, sender),
            reference=self.extract_reference(sms_body),
            account_last4=self.extract_account_last4(sms_body),
            balance=self.extract_balance(sms_body),
            credit_limit=self.extract_available_limit(sms_body) if is_credit else None,
            sms_body=sms_body,
            sender=sender,
            timestamp=timestamp,
            bank_name=self.get_bank_name(),
            transaction_hash=self.transaction_hash(sms_body, sender, amount),
            is_from_card=is_credit or self.detect_is_card(sms_body),
            currency=self.extract_currency(sms_body) or self.get_currency(),
            from_account=from_account,
            to_account=to_account,
        )

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------
    def is_transaction_message(self, message: str) -> bool:
        return self.region.is_transaction_message(message, self.EXTRA_VERBS)

    def extract_transaction_type(self, message: str) -> Optional[TransactionType]:
        if self.DIRECTION is not None:
            direction = self.DIRECTION(message)
            if direction is not None:
                return direction
        if self.TYPES is None:
            return self.region.extract_transaction_type(message, self)
        if self.is_investment_transaction(message.lower()):
            return TransactionType.INVESTMENT
        return self.TYPES(message)

    def is_investment_transaction(self, lower_message: str) -> bool:
        return self.region.is_investment_transaction(lower_message)

    def detect_is_card(self, message: str) -> bool:
        return self.region.detect_is_card(message)

    # -------------------------------------------------------------------------
    # Field extraction
    # -------------------------------------------------------------------------
    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message, fallback=self.region.extract_amount)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        merchant = self.MERCHANT(message, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)
        if merchant is not None:
            return merchant
        return self.region.extract_merchant(message, self)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message, fallback=self.region.extract_reference)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message, fallback=self.region.extract_account_last4)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.BALANCE(message, fallback=self.region.extract_balance)

    def extract_available_limit(self, message: str) -> Optional[Decimal]:
        return self.LIMIT(message, fallback=self.region.extract_available_limit)

    def extract_currency(self, message: str) -> Optional[str]:
        """ISO code the message states for itself; None means home currency."""
        return self.region.extract_currency(message)

    def extract_transfer_accounts(self, message: str) -> Tuple[Optional[str], Optional[str]]:
        """(from_account, to_account) for parsers that model both transfer endpoints."""
        return None, None

    def transaction_hash(self, message: str, sender: str, amount: Decimal) -> Optional[str]:
        """Issuer-specific dedup hash; most issuers rely on the content fingerprint instead."""
        return None

    def clean_merchant_name(self, merchant: str) -> str:
        return self.region.clean_merchant_name(merchant)

    def is_valid_merchant_name(self, name: str) -> bool:
        return self.region.is_valid_merchant_name(name)

    # -------------------------------------------------------------------------
    # Mandates and balance-only notices
    # -------------------------------------------------------------------------
    def is_mandate_notification(self, message: str) -> bool:
        return self.region.is_mandate_notification(message)

    def parse_mandate_subscription(self, message: str) -> Optional[MandateInfo]:
        return self.region.parse_mandate_subscription(message, self)

    def is_balance_update_notification(self, message: str) -> bool:
        return self.region.is_balance_update_notification(message)

    def parse_balance_update(self, message: str) -> Optional[BalanceUpdateInfo]:
        return self.region.parse_balance_update(message, self)
