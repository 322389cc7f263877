class Constants:
    class Parsing:
        MIN_MERCHANT_NAME_LENGTH = 2
        # Fixed amount scale used when fingerprinting
        AMOUNT_SCALE = "0.00"

    class Currency:
        DEFAULT = "INR"

        # ISO codes accepted when a message names its own currency
        KNOWN = frozenset({
            "INR", "USD", "EUR", "GBP", "AED", "SAR", "QAR", "OMR", "KWD", "BHD",
            "THB", "SGD", "MYR", "IDR", "PHP", "VND", "JPY", "CNY", "HKD", "KRW",
            "AUD", "NZD", "CAD", "CHF", "SEK", "NOK", "DKK", "PLN", "CZK", "HUF",
            "TRY", "RUB", "BYN", "UAH", "KZT", "EGP", "ZAR", "NGN", "KES", "TZS",
            "UGX", "ETB", "GHS", "MAD", "LKR", "NPR", "BDT", "PKR", "IRR", "COP",
            "MXN", "BRL", "ARS", "CLP", "PEN",
        })

        # Non-ISO spellings a home-currency amount is written with
        SYMBOLS = {
            "INR": (r"Rs\.?", r"₹", r"INR"),
            "USD": (r"US\$", r"\$", r"USD"),
            "AED": (r"AED", r"Dhs?\.?"),
            "THB": (r"THB", r"฿", r"Baht"),
            "IRR": (r"IRR", r"Rials?"),
            "KES": (r"Ksh\.?", r"KES"),
            "TZS": (r"Tsh\.?", r"TZS"),
            "ETB": (r"ETB", r"Br\.?", r"Birr"),
            "NPR": (r"NPR", r"Rs\.?"),
            "COP": (r"COP", r"\$"),
            "BYN": (r"BYN", r"BYR"),
            "SAR": (r"SAR", r"SR"),
            "EGP": (r"EGP", r"LE"),
            "PKR": (r"PKR", r"Rs\.?"),
        }

    class Months:
        ABBREVIATIONS = {
            "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
            "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
        }

    class MobileMoney:
        # account_last4 placeholder for wallets that have no account number
        WALLET = "WALLET"
