from dataclasses import asdict, dataclass
from decimal import Decimal, ROUND_HALF_UP
import hashlib
from typing import Any, Dict, Optional

from smsledger.transaction_type import TransactionType


@dataclass(frozen=True)
class ParsedTransaction:
    """A single money movement recovered from an SMS.

    Instances only exist once both ``amount`` and ``type`` were resolved;
    every other field is best-effort.
    """

    amount: Decimal
    type: TransactionType
    sms_body: str
    sender: str
    timestamp: int
    bank_name: str
    merchant: Optional[str] = None
    reference: Optional[str] = None
    account_last4: Optional[str] = None
    balance: Optional[Decimal] = None
    credit_limit: Optional[Decimal] = None
    transaction_hash: Optional[str] = None
    is_from_card: bool = False
    currency: str = "INR"
    from_account: Optional[str] = None
    to_account: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            raise TypeError(f"amount must be Decimal, got {type(self.amount).__name__}")
        if self.amount < 0:
            raise ValueError(f"amount must be non-negative, got {self.amount}")
        if not isinstance(self.type, TransactionType):
            raise TypeError(f"type must be TransactionType, got {self.type!r}")

    def generate_transaction_id(self) -> str:
        """Content hash used as the dedup key.

        The timestamp is left out: the same SMS seen by the broadcast
        receiver and by an inbox scan carries two different timestamps.
        """
        normalized_amount = self.amount.quantize(Decimal("0.00"), rounding=ROUND_HALF_UP)
        sms_body_hash = hashlib.md5(self.sms_body.encode("utf-8")).hexdigest()[:16]

        data = f"{self.sender}|{normalized_amount}|{sms_body_hash}"
        return hashlib.md5(data.encode("utf-8")).hexdigest()

    def to_dict(self) -> Dict[str, Any]:
        row = asdict(self)
        row["type"] = self.type.value
        for key in ("amount", "balance", "credit_limit"):
            if row[key] is not None:
                row[key] = str(row[key])
        row["transaction_id"] = self.generate_transaction_id()
        return row
