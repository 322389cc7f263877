import pandas as pd
import pytest

from smsledger.main import PARSED_FILE, UNPARSED_FILE, main, parse_sms_frame

DEBIT = "INR 500.00 debited from A/c XX1234 on 01-01-25 to SWIGGY. Avl Bal is INR 4,500.00"


@pytest.fixture
def sms_export():
    return pd.DataFrame(
        {
            "address": ["IDBIBK", "IDBIBK", "IDBIBK", "QQ-ZZZZZZ", None],
            "body": [DEBIT, DEBIT, "Your OTP is 123456", DEBIT, DEBIT],
            "date": [1735700000000, 1735700099999, 1735700000000, 1735700000000, "not-a-date"],
        }
    )


def test_parse_sms_frame_dedups_by_transaction_id(sms_export):
    df_parsed, df_unparsed = parse_sms_frame(sms_export)
    assert len(df_parsed) == 1
    row = df_parsed.iloc[0]
    assert row["amount"] == "500.00"
    assert row["bank_name"] == "IDBI Bank"
    assert row["timestamp"] == 1735700000000

    assert list(df_unparsed["outcome"]) == ["not_transaction", "no_parser", "no_parser"]
    assert list(df_unparsed["bank_name"])[0] == "IDBI Bank"


def test_missing_columns_are_reported():
    with pytest.raises(ValueError):
        parse_sms_frame(pd.DataFrame({"text": ["hello"]}))


def test_main_writes_both_files(tmp_path, sms_export):
    source = tmp_path / "sms.csv"
    sms_export.to_csv(source, index=False)
    out_dir = tmp_path / "out"

    assert main(["--input", str(source), "--output-dir", str(out_dir)]) == 0

    parsed = pd.read_csv(out_dir / PARSED_FILE, dtype={"transaction_id": str})
    unparsed = pd.read_csv(out_dir / UNPARSED_FILE)
    assert len(parsed) == 1
    assert parsed.loc[0, "transaction_id"] == parse_sms_frame(sms_export)[0].loc[0, "transaction_id"]
    assert len(unparsed) == 3


def test_main_rejects_missing_input(tmp_path):
    with pytest.raises(SystemExit):
        main(["--input", str(tmp_path / "missing.csv")])
