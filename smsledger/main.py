"""Batch runner: parse an SMS export CSV into transaction and leftover CSVs.

    smsledger-batch --input sms_inbox.csv --output-dir output/
"""

import argparse
import os
from typing import List, Optional, Tuple

import pandas as pd

from smsledger.bank.bank_parser_factory import DEFAULT_REGISTRY
from smsledger.bank.bank_parser_registry import BankParserRegistry
from smsledger.config import Settings, get_settings
from smsledger.logging_setup import configure_logging, get_logger
from smsledger.outcome import parse_message

logger = get_logger(__name__)

PARSED_FILE = "parsed_transactions.csv"
UNPARSED_FILE = "unparsed_sms.csv"

TRANSACTION_COLUMNS = [
    "transaction_id", "timestamp", "sender", "bank_name", "amount", "currency", "type",
    "merchant", "reference", "account_last4", "balance", "credit_limit", "is_from_card",
    "from_account", "to_account", "transaction_hash", "sms_body",
]


def parse_sms_frame(
    df_raw: pd.DataFrame,
    registry: BankParserRegistry = DEFAULT_REGISTRY,
    settings: Optional[Settings] = None,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Runs every row of an SMS export through ``registry``.

    Returns ``(df_parsed, df_unparsed)``: one row per distinct transaction,
    and the input rows that produced none, tagged with their outcome.
    """
    settings = settings or get_settings()
    missing = [c for c in (settings.sender_column, settings.body_column) if c not in df_raw.columns]
    if missing:
        raise ValueError(f"Input is missing required column(s): {', '.join(missing)}")

    senders = df_raw[settings.sender_column].fillna("").astype(str)
    bodies = df_raw[settings.body_column].fillna("").astype(str)
    if settings.timestamp_column in df_raw.columns:
        timestamps = pd.to_numeric(df_raw[settings.timestamp_column], errors="coerce").fillna(0).astype("int64")
    else:
        timestamps = pd.Series(0, index=df_raw.index, dtype="int64")

    parsed_rows: List[dict] = []
    unparsed_index: List = []
    outcomes: List[str] = []
    bank_names: List[Optional[str]] = []

    for idx in df_raw.index:
        sender, body = senders[idx], bodies[idx]
        try:
            result = parse_message(registry, body, sender, int(timestamps[idx]))
        except Exception:
            logger.exception("Failed to parse row %s from %s", idx, sender)
            unparsed_index.append(idx)
            outcomes.append("error")
            bank_names.append(None)
            continue

        if result.parsed:
            parsed_rows.append(result.transaction.to_dict())
        else:
            unparsed_index.append(idx)
            outcomes.append(result.outcome.value)
            bank_names.append(result.bank_name)

    df_parsed = pd.DataFrame(parsed_rows, columns=TRANSACTION_COLUMNS)
    before = len(df_parsed)
    df_parsed = df_parsed.drop_duplicates(subset="transaction_id", keep="first").reset_index(drop=True)
    if before != len(df_parsed):
        logger.info("Dropped %d duplicate transaction(s)", before - len(df_parsed))

    df_unparsed = df_raw.loc[unparsed_index].copy()
    df_unparsed["outcome"] = outcomes
    df_unparsed["bank_name"] = bank_names

    return df_parsed, df_unparsed


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Parse an SMS export into transactions")
    parser.add_argument("--input", type=str, required=True, help="Input SMS CSV file path")
    parser.add_argument(
        "--output-dir", "--output_dir",
        dest="output_dir",
        type=str,
        default="output",
        help="Output directory",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: SMSLEDGER_LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    if not os.path.exists(args.input):
        parser.error(f"input file not found: {args.input}")

    logger.info("Reading SMS export from %s", args.input)
    df_raw = pd.read_csv(args.input, low_memory=False)

    try:
        df_parsed, df_unparsed = parse_sms_frame(df_raw, DEFAULT_REGISTRY, settings)
    except ValueError as exc:
        parser.error(str(exc))

    os.makedirs(args.output_dir, exist_ok=True)
    parsed_path = os.path.join(args.output_dir, PARSED_FILE)
    unparsed_path = os.path.join(args.output_dir, UNPARSED_FILE)
    df_parsed.to_csv(parsed_path, index=False)
    df_unparsed.to_csv(unparsed_path, index=False)

    summary = df_unparsed["outcome"].value_counts().to_dict()
    logger.info(
        "Processed %d messages: %d transactions, %d unparsed %s",
        len(df_raw), len(df_parsed), len(df_unparsed), summary,
    )
    logger.info("Output saved to %s and %s", parsed_path, unparsed_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
