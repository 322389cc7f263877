"""HTTP API around the parser registry.

Run with ``uvicorn smsledger.api:app`` or ``python -m smsledger.api``.
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException
from pydantic import AliasChoices, BaseModel, Field

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.bank_parser_factory import DEFAULT_REGISTRY
from smsledger.bank.bank_parser_registry import BankParserRegistry
from smsledger.config import Settings, get_settings
from smsledger.logging_setup import configure_logging, get_logger
from smsledger.outcome import ParseOutcome, ParseResult, parse_message
from smsledger.parsed_transaction import ParsedTransaction

logger = get_logger(__name__)

STATUS_SUCCESS = "success"
STATUS_UNPARSED = "unparsed"
STATUS_NO_PARSER = "no_parser"
STATUS_ERROR = "error"


class SMSRequest(BaseModel):
    # "address"/"body"/"date" are the column names of Android SMS exports
    id: Optional[int] = None
    sms_body: str = Field(validation_alias=AliasChoices("sms_body", "body"))
    sender: str = Field(validation_alias=AliasChoices("sender", "address"))
    timestamp: Optional[int] = Field(None, validation_alias=AliasChoices("timestamp", "date"))


class BatchRequest(BaseModel):
    messages: List[SMSRequest]


class TransactionModel(BaseModel):
    transaction_id: str
    amount: str
    type: str
    merchant: Optional[str] = None
    reference: Optional[str] = None
    account_last4: Optional[str] = None
    balance: Optional[str] = None
    credit_limit: Optional[str] = None
    bank_name: str
    is_from_card: bool = False
    currency: str
    from_account: Optional[str] = None
    to_account: Optional[str] = None
    transaction_hash: Optional[str] = None
    timestamp: int


class ParseResponse(BaseModel):
    id: Optional[int] = None
    status: str
    outcome: str
    bank_name: Optional[str] = None
    message: Optional[str] = None
    transaction: Optional[TransactionModel] = None


class BatchResponse(BaseModel):
    total: int
    success: int
    unparsed: int
    no_parser: int
    error: int
    results: List[ParseResponse]


class BalanceResponse(BaseModel):
    bank_name: str
    account_last4: Optional[str] = None
    balance: str
    as_of_date: Optional[datetime] = None


class MandateResponse(BaseModel):
    bank_name: str
    amount: str
    next_deduction_date: Optional[str] = None
    merchant: str
    umn: Optional[str] = None
    date_format: str


def _money(value: Optional[Decimal]) -> Optional[str]:
    return str(value) if value is not None else None


def format_parsed_txn(txn: ParsedTransaction) -> TransactionModel:
    return TransactionModel(
        transaction_id=txn.generate_transaction_id(),
        amount=str(txn.amount),
        type=txn.type.value,
        merchant=txn.merchant,
        reference=txn.reference,
        account_last4=txn.account_last4,
        balance=_money(txn.balance),
        credit_limit=_money(txn.credit_limit),
        bank_name=txn.bank_name,
        is_from_card=txn.is_from_card,
        currency=txn.currency,
        from_account=txn.from_account,
        to_account=txn.to_account,
        transaction_hash=txn.transaction_hash,
        timestamp=txn.timestamp,
    )


def _timestamp(request: SMSRequest) -> int:
    if request.timestamp is not None:
        return request.timestamp
    return int(time.time() * 1000)


def to_response(request: SMSRequest, result: ParseResult) -> ParseResponse:
    response = ParseResponse(id=request.id, status=STATUS_UNPARSED, outcome=result.outcome.value, bank_name=result.bank_name)
    if result.outcome is ParseOutcome.PARSED:
        response.status = STATUS_SUCCESS
        response.transaction = format_parsed_txn(result.transaction)
    elif result.outcome is ParseOutcome.NO_PARSER:
        response.status = STATUS_NO_PARSER
        response.message = f"No parser found for sender: {request.sender}"
    elif result.outcome is ParseOutcome.NOT_TRANSACTION:
        response.message = "Message is not a transaction."
    else:
        response.message = "Could not extract transaction data."
    return response


def get_registry() -> BankParserRegistry:
    return DEFAULT_REGISTRY


def _require_parser(registry: BankParserRegistry, sender: str) -> BankParser:
    parser = registry.resolve(sender)
    if parser is None:
        raise HTTPException(status_code=404, detail=f"No parser found for sender: {sender}")
    return parser


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(
    title=get_settings().api_title,
    description="Turns bank, card and mobile-money SMS alerts into structured transactions.",
    version="0.3.0",
    lifespan=lifespan,
)


@app.post("/parse", response_model=ParseResponse)
def parse_sms(request: SMSRequest, registry: BankParserRegistry = Depends(get_registry)):
    """
    Parse a single SMS message.
    """
    result = parse_message(registry, request.sms_body, request.sender, _timestamp(request))
    logger.info("Parsed message from %s: %s", request.sender, result.outcome.value)
    return to_response(request, result)


@app.post("/parse-batch", response_model=BatchResponse)
def parse_sms_batch(
    batch: BatchRequest,
    registry: BankParserRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    """
    Parse many SMS messages in one request; a failing item never fails the batch.
    """
    if len(batch.messages) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {len(batch.messages)} exceeds the limit of {settings.max_batch_size} messages",
        )

    results = []
    for request in batch.messages:
        try:
            result = parse_message(registry, request.sms_body, request.sender, _timestamp(request))
            results.append(to_response(request, result))
        except Exception:
            logger.exception("Failed to parse message from %s", request.sender)
            results.append(ParseResponse(
                id=request.id,
                status=STATUS_ERROR,
                outcome=STATUS_ERROR,
                message="Unexpected error while parsing this message.",
            ))

    counts = {status: 0 for status in (STATUS_SUCCESS, STATUS_UNPARSED, STATUS_NO_PARSER, STATUS_ERROR)}
    for response in results:
        counts[response.status] += 1
    logger.info("Parsed batch of %d messages: %s", len(results), counts)

    return BatchResponse(total=len(results), results=results, **counts)


@app.post("/balance", response_model=BalanceResponse)
def parse_balance(request: SMSRequest, registry: BankParserRegistry = Depends(get_registry)):
    """
    Read a balance-only notification.
    """
    parser = _require_parser(registry, request.sender)
    info = parser.parse_balance_update(request.sms_body)
    if info is None:
        raise HTTPException(status_code=404, detail="Message is not a balance notification.")
    return BalanceResponse(
        bank_name=info.bank_name,
        account_last4=info.account_last4,
        balance=str(info.balance),
        as_of_date=info.as_of_date,
    )


@app.post("/mandate", response_model=MandateResponse)
def parse_mandate(request: SMSRequest, registry: BankParserRegistry = Depends(get_registry)):
    """
    Read an e-mandate or upcoming-debit notice.
    """
    parser = _require_parser(registry, request.sender)
    info = parser.parse_mandate_subscription(request.sms_body)
    if info is None:
        raise HTTPException(status_code=404, detail="Message is not a mandate notification.")
    return MandateResponse(
        bank_name=parser.get_bank_name(),
        amount=str(info.amount),
        next_deduction_date=info.next_deduction_date,
        merchant=info.merchant,
        umn=info.umn,
        date_format=info.date_format,
    )


@app.get("/banks", response_model=List[str])
def list_banks(registry: BankParserRegistry = Depends(get_registry)):
    return registry.bank_names()


@app.get("/health")
def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
