import re

from smsledger.cascade import NUMBER


class CompiledPatterns:
    class Amount:
        RS_PATTERN = re.compile(r"\bRs\.?\s*" + NUMBER, re.IGNORECASE)
        INR_PATTERN = re.compile(r"\bINR\s*" + NUMBER, re.IGNORECASE)
        RUPEE_SYMBOL_PATTERN = re.compile(r"₹\s*" + NUMBER)
        ALL_PATTERNS = [RS_PATTERN, INR_PATTERN, RUPEE_SYMBOL_PATTERN]

    class Reference:
        UPI_REF = re.compile(r"UPI\s*(?:Ref\.?|Ref\s*No\.?|RRN)?[:\s]+(\d{8,})", re.IGNORECASE)
        REF_NUMBER = re.compile(r"Reference\s+(?:Number|No\.?)[:\s]+([A-Z0-9]+)", re.IGNORECASE)
        RRN = re.compile(r"\bRRN[:\s.]*(?:No\.?)?[:\s]*([A-Z0-9]{6,})", re.IGNORECASE)
        GENERIC_REF = re.compile(
            r"\b(?:Ref|Txn\s*Id|Txn|Transaction\s*Id)(?:\s*No\.?)?[:\s#.]+([A-Z0-9]*\d[A-Z0-9]*)",
            re.IGNORECASE,
        )
        ALL_PATTERNS = [UPI_REF, REF_NUMBER, RRN, GENERIC_REF]

    class Account:
        AC_WITH_MASK = re.compile(
            r"(?:A/c|Account|Acct|Acc|\bAc)(?:\s*No)?\.?\s*(?:ending\s+(?:with\s+|in\s+)?)?[:\s]*[X*x.]*(\d{3,})\b",
            re.IGNORECASE,
        )
        CARD_WITH_MASK = re.compile(
            r"Card\s*(?:No\.?\s*)?(?:ending\s+(?:with\s+|in\s+)?)?[X*x.]*(\d{4})\b",
            re.IGNORECASE,
        )
        # XX1234, **1234, X1234 anywhere
        MASKED = re.compile(r"(?:XX+|\*{2,}|x{2,})(\d{3,})\b")
        ALL_PATTERNS = [AC_WITH_MASK, CARD_WITH_MASK, MASKED]

    class Balance:
        KEYWORD = (
            r"\b(?:avl\.?|avail\.?|available|a/c|updated|remaining|closing|clear|total|ledger|current)?"
            r"\s*bal(?:ance)?\b"
        )

    class Limit:
        KEYWORD = (
            r"(?:Avl\.?\s*(?:Cr\.?\s*)?(?:Lmt|Limit)|Avail\.?\s*(?:Lmt|Limit)|Available\s+(?:Credit\s+)?(?:Limit|Lmt)"
            r"|Available\s+Credit|Avl\s+Credit)"
        )

    class Merchant:
        _NOT_ACCOUNT = r"(?!(?:your\s+|the\s+)?(?:a/c|ac\b|acct|account|card|xx|\*|\d))"
        _STOP = r"(?=\s+on\b|\s+at\b|\s+Ref|\s+UPI|\s+via\b|\s+using\b|\s+Avl|\s*\.(?:\s|$)|\s*[,;(]|$)"
        TO_PATTERN = re.compile(r"\bto\s+" + _NOT_ACCOUNT + r"([^.\n]+?)" + _STOP, re.IGNORECASE)
        FROM_PATTERN = re.compile(r"\bfrom\s+" + _NOT_ACCOUNT + r"([^.\n]+?)" + _STOP, re.IGNORECASE)
        AT_PATTERN = re.compile(r"\bat\s+(?!\d)([^.\n]+?)(?=\s+on\b|\s+Ref|\s+Avl|\s*\.(?:\s|$)|\s*[,;(]|$)", re.IGNORECASE)
        FOR_PATTERN = re.compile(r"\bfor\s+(?!\d|Rs|INR)([^.\n]+?)(?=\s+on\b|\s+at\b|\s+Ref|\s*\.(?:\s|$)|\s*[,;(]|$)", re.IGNORECASE)
        VPA_WITH_NAME = re.compile(r"VPA\s+[^@\s]+@\S+\s*\(([^)]+)\)", re.IGNORECASE)
        VPA_PATTERN = re.compile(r"VPA\s+([^@\s]+)@", re.IGNORECASE)
        ALL_PATTERNS = [TO_PATTERN, FROM_PATTERN, AT_PATTERN, FOR_PATTERN]

    class Cleaning:
        TRAILING_PARENTHESES = re.compile(r"\s*\(.*?\)\s*$")
        REF_NUMBER_SUFFIX = re.compile(r"\s+Ref\b.*", re.IGNORECASE)
        DATE_SUFFIX = re.compile(r"\s+on\s+\d{1,2}.*", re.IGNORECASE)
        UPI_SUFFIX = re.compile(r"\s+UPI.*", re.IGNORECASE)
        TIME_SUFFIX = re.compile(r"\s+at\s+\d{1,2}:\d{2}.*", re.IGNORECASE)
        TRAILING_REFERENCE = re.compile(r"[\s/-]+\d{6,}$")
        TRAILING_PUNCTUATION = re.compile(r"[\s\-.,:;/*]+$")
        LEADING_PUNCTUATION = re.compile(r"^[\s\-.,:;/*]+")
        PVT_LTD = re.compile(r"(\s+PVT\.?\s*LTD\.?|\s+PRIVATE\s+LIMITED)$", re.IGNORECASE)
        LTD = re.compile(r"(\s+LTD\.?|\s+LIMITED|\s+LLC|\s+INC\.?|\s+L\.?L\.?C\.?)$", re.IGNORECASE)
        WHITESPACE = re.compile(r"\s+")
        ACCOUNT_LIKE = re.compile(r"^(?:a/c|ac|acct|account|card)\b|(?:xx|\*\*)\d", re.IGNORECASE)

    class Currency:
        # ISO code written right before or right after an amount
        CODE_BEFORE = re.compile(r"\b([A-Z]{3})\s?" + NUMBER)
        CODE_AFTER = re.compile(NUMBER + r"\s?([A-Z]{3})\b")

    class Date:
        DD_MM_YY = re.compile(r"\d{1,2}/\d{1,2}/\d{2}")
        DD_MM_YYYY = re.compile(r"\d{1,2}/\d{1,2}/\d{4}")
        DD_MMM_YY = re.compile(r"\d{1,2}-[A-Za-z]{3}-\d{2,4}", re.IGNORECASE)
        DD_MM_YYYY_DASH = re.compile(r"\d{1,2}-\d{1,2}-\d{2,4}")
        AS_OF = re.compile(
            r"\bas\s+(?:on|of|at)\s+(\d{1,2}[-/ ](?:[A-Za-z]{3}|\d{1,2})[-/ ]\d{2,4})",
            re.IGNORECASE,
        )

    class Time:
        HH_MM_SS = re.compile(r"\d{1,2}:\d{2}:\d{2}")
        HH_MM = re.compile(r"\d{1,2}:\d{2}")
