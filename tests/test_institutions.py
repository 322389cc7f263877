from decimal import Decimal

import pytest

from smsledger.bank.bank_parser_factory import get_parser_by_name
from smsledger.transaction_type import TransactionType

TIMESTAMP = 1735700000000

INCOME = TransactionType.INCOME
EXPENSE = TransactionType.EXPENSE
CREDIT = TransactionType.CREDIT
TRANSFER = TransactionType.TRANSFER
INVESTMENT = TransactionType.INVESTMENT

# (bank, sender, body, expected fields)
SAMPLES = [
    # Standard Chartered
    (
        "Standard Chartered Bank",
        "VM-SCBANK-S",
        "Your a/c XX3421 is debited for Rs. 302.00 on 03-12-2025 15:49 and credited to a/c XX1465 "
        "(UPI Ref no 487597904232).Plz call 18002586465 if not done by you.",
        dict(amount="302.00", type=EXPENSE, merchant="UPI Transfer to XX1465", account_last4="3421",
             reference="487597904232"),
    ),
    (
        "Standard Chartered Bank",
        "JK-SCBANK-S",
        "Dear Customer, there is an NEFT credit of INR 48,796.00 in your account 123xxxx7655 on 1/11/2025."
        "Available Balance:INR 97,885.05 -StanChart",
        dict(amount="48796.00", type=INCOME, merchant="NEFT Credit", account_last4="7655", balance="97885.05",
             currency="INR"),
    ),
    (
        "Standard Chartered Bank",
        "SCBANK",
        "Dear Customer, there is an RTGS credit of INR 100,000.00 in your account 456xxxx1234 on 15/12/2025."
        "Available Balance:INR 250,000.00 -StanChart",
        dict(amount="100000.00", type=INCOME, merchant="RTGS Credit", account_last4="1234", balance="250000.00"),
    ),
    (
        "Standard Chartered Bank",
        "VD-SCBANK-S",
        "Dear Customer, there is an IMPS credit of INR 5,000.00 in your account 789xxxx5555 on 10/12/2025."
        "Available Balance:INR 15,000.00 -StanChart",
        dict(amount="5000.00", type=INCOME, merchant="IMPS Credit", account_last4="5555", balance="15000.00"),
    ),
    # South Indian Bank
    (
        "South Indian Bank",
        "SIBSMS",
        "UPI Credit:INR Rs.15000.00 in A/c X7377. Info: UPI/TGRB/190200588907/ Sham Ak on 26-12-25 19:02:01."
        "Final balance is Rs.34567.67 -South Indian Bank",
        dict(amount="15000.00", type=INCOME, merchant="Sham Ak", account_last4="7377", balance="34567.67",
             reference="190200588907"),
    ),
    (
        "South Indian Bank",
        "SIBSMS",
        "Dear Customer, Your A/c X7377 is credited with Rs.792.02 Info: IMPS/FDRL/528005821348/EPIFI ACCOUN. "
        "Final balance is Rs.793.02-South Indian Bank",
        dict(amount="792.02", type=INCOME, merchant="EPIFI ACCOUN", account_last4="7377", balance="793.02",
             reference="528005821348"),
    ),
    (
        "South Indian Bank",
        "SIBSMS",
        "UPI debit:Rs.599.00 A/c X7477, 16-10-25 16:25:29 RRN: 565526068910 Bal:Rs.12345.89 Block A/c? "
        "Call18004251809/SMS BLK<A/c>to 9840777222-South Indian Bank",
        dict(amount="599.00", type=EXPENSE, merchant="UPI Transaction", account_last4="7477", balance="12345.89",
             reference="565526068910"),
    ),
    # Liv
    (
        "Liv Bank",
        "Liv",
        "AED 3,586.96 has been credited to account 095XXX71XXXO1. Current balance is AED 4,377.01.\n\n"
        "Credits post cut-offs will be available next day.",
        dict(amount="3586.96", type=INCOME, merchant="Account Credit", account_last4="O1", balance="4377.01",
             currency="AED"),
    ),
    (
        "Liv Bank",
        "Liv",
        "AED 1,000.00 has been credited to account 095XXX71XXXO1. Current balance is AED 5,000.00.",
        dict(amount="1000.00", type=INCOME, merchant="Account Credit", account_last4="O1", balance="5000.00"),
    ),
    # Saraswat
    (
        "Saraswat Co-operative Bank",
        "JD-SARBNK-S",
        "Your A/c no. 1234 is credited with INR 100.50 on 13-10-2025 towards ACH Credit:MERCHANT NAME. "
        "Current Bal is INR 950.00 CR  - Saraswat Bank",
        dict(amount="100.50", type=INCOME, merchant="MERCHANT NAME", account_last4="1234", balance="950.00"),
    ),
    (
        "Saraswat Co-operative Bank",
        "JD-SARBNK-S",
        "Dear Customer, Your account no. ending with 5678 is debited with INR 1,000.00 on 25-09-2025  for S.I. "
        "Current Bal is INR 8,500.00CR. - Saraswat Bank",
        dict(amount="1000.00", type=EXPENSE, merchant="Standing Instruction", account_last4="5678",
             balance="8500.00"),
    ),
    (
        "Saraswat Co-operative Bank",
        "AD-SARBNK-S",
        "Dear Customer, Your account no. ending with 3456 is debited with INR 25,000.00 on 15-10-2025 for NEFT. "
        "Current Bal is INR 50,000.00CR. - Saraswat Bank",
        dict(amount="25000.00", type=EXPENSE, merchant="NEFT Transfer", account_last4="3456", balance="50000.00"),
    ),
    # Dhanlaxmi
    (
        "Dhanlaxmi Bank",
        "VM-DHANBK",
        'INR 500.00 is credited to A/c XXXX9999 on 01-JAN-2026 - "UPI TXN: /111222333444-Salary/Payment from '
        'Employer". Aval Bal is INR 75,500.00 -DhanlaxmiBank',
        dict(amount="500.00", type=INCOME, merchant="Employer", account_last4="9999", balance="75500.00",
             reference="111222333444"),
    ),
    (
        "Dhanlaxmi Bank",
        "TL-DHANBK-S",
        'INR 20.00 is debited from A/c XXXX1234 on 28-NOV-2025 - "UPI TXN: /675325120952-MR /Payment from '
        'PhonePe/Q12345444@ybl/YESB0YBLUPI/4172120251128000100004392". Aval Bal is INR 26,578.49. '
        "If not transacted call 044-42413000.-DhanlaxmiBank",
        dict(amount="20.00", type=EXPENSE, merchant="PhonePe", account_last4="1234", balance="26578.49"),
    ),
    (
        "Dhanlaxmi Bank",
        "TL-DHANBK-S",
        'INR 50,000.00 is debited from A/c XXXX5678 on 15-DEC-2025 - "UPI TXN: /123456789012-MR /Payment from '
        'GPay". Aval Bal is INR 1,25,000.50. If not transacted call 044-42413000.-DhanlaxmiBank',
        dict(amount="50000.00", type=EXPENSE, merchant="GPay", account_last4="5678", balance="125000.50"),
    ),
    (
        "Dhanlaxmi Bank",
        "TL-DHANBK-S",
        'INR 10.00 is credited to A/c XXXX1234 on 24-APR-2025 - "UPI TXN: /398353431145-Paytm/payment on Myntra '
        'using UPI on Mar 25 2025/one97987¡axisbank/911188478932/41721202504240001". '
        "Aval Bal is INR 36,278.92 -DhanlaxmiBank",
        dict(amount="10.00", type=INCOME, merchant="Myntra", account_last4="1234", balance="36278.92"),
    ),
    (
        "Dhanlaxmi Bank",
        "TL-DHANBK-S",
        "Your a/c no. XXXXXXXX1234 is credited for Rs.10.00 on 24-04-25 and debited from a/c no. XXXXXXXX0987 "
        "(UPI Ref no 398353431145).-DhanlaxmiBank",
        dict(amount="10.00", type=INCOME, merchant="Internal Transfer", account_last4="1234",
             reference="398353431145"),
    ),
    # CIB Egypt
    (
        "CIB Egypt",
        "CIB",
        "The transaction on your credit card#8016  from ORACLE IRELAND  with EUR .93 on 15/11/25  at 05:14 "
        "has been refunded. Please try again. Thank you",
        dict(amount="0.93", type=INCOME, merchant="ORACLE IRELAND", account_last4="8016", currency="EUR"),
    ),
    (
        "CIB Egypt",
        "CIB",
        "Your credit card ending with#8016 was charged for EGP 118.00 at SAOOD MARKET on 24/11/25  at 18:27. "
        "Card available limit is EGP  10000.21. For more details, please visit https://cib.eg/mb",
        dict(amount="118.00", type=EXPENSE, merchant="SAOOD MARKET", account_last4="8016", currency="EGP",
             credit_limit="10000.21"),
    ),
    (
        "CIB Egypt",
        "CIB",
        "Your credit card ending with#5678 was charged for USD 99.99 at AMAZON on 05/01/26  at 09:15. "
        "Card available limit is EGP  15000.50. For more details, please visit https://cib.eg/mb",
        dict(amount="99.99", merchant="AMAZON", account_last4="5678", currency="USD"),
    ),
    # Huntington
    (
        "Huntington Bank",
        "Huntington Bank",
        "Huntington Heads Up. We processed a debit card withdrawal: $25.00 at Bob Inc. "
        "Acct CK0000 has a $10.12 bal (10/19/25 5:43 AM ET).",
        dict(amount="25.00", type=EXPENSE, merchant="Bob Inc", account_last4="0000", balance="10.12"),
    ),
    (
        "Huntington Bank",
        "HUNTINGTON",
        "Huntington Heads Up. We processed an ATM withdrawal: $162.45 at POS John Inc. "
        "Acct CK0000 has a $20.20 bal (9/03/25 12:12 PM ET).",
        dict(amount="162.45", type=EXPENSE, merchant="POS John Inc", balance="20.20"),
    ),
    (
        "Huntington Bank",
        "HUNTINGTON",
        "Huntington Heads Up. We processed an ACH withdrawal: $50.67 at GEICO           . "
        "Acct CK0000 has a $6211.32 bal (8/09/25 3:23 PM ET).",
        dict(amount="50.67", type=EXPENSE, merchant="GEICO", balance="6211.32"),
    ),
    (
        "Huntington Bank",
        "HUNTINGTON",
        "Huntington Heads Up. We processed a debit card withdrawal: $20.00 at BC *UBER CASH. "
        "Acct CK0000 has a -$15.01 bal (9/10/25 11:41 PM ET).",
        dict(amount="20.00", merchant="BC *UBER CASH", balance="-15.01"),
    ),
    (
        "Huntington Bank",
        "HUNTINGTON",
        "Huntington Heads Up. We processed a debit card withdrawal: $100.50 at AMAZON.COM. "
        "Acct CK1234 has a $500.00 bal (12/01/25 2:30 PM ET).",
        dict(amount="100.50", merchant="AMAZON.COM", account_last4="1234", balance="500.00"),
    ),
    # Siddhartha
    (
        "Siddhartha Bank",
        "SBL_Alert",
        "Dear [NAME], AC ###XXXX1234, NPR 97.00 withdrawn on 09/12/2025 12:31:20 for Fund Trf to A/C PAYABLE "
        "IBFT (IN-670725619,222",
        dict(amount="97.00", type=EXPENSE, merchant="Fund Transfer (IBFT)", account_last4="1234",
             reference="IN-670725619"),
    ),
    (
        "Siddhartha Bank",
        "SBL_Alert",
        "Dear [NAME], AC ###XXXX1234, NPR 120,000.00 deposited on 28/11/2025 20:13:59 for Fund Trf frm A/C "
        "PAYABLE IBF-FON:IBFT:1171853",
        dict(amount="120000.00", type=INCOME, merchant="Fund Transfer (IBFT)", reference="1171853"),
    ),
    (
        "Siddhartha Bank",
        "SBL_Alert",
        "Dear [NAME], AC ###XXXX1234, NPR 1,822.00 withdrawn on 09/12/2025 12:29:06 for Fund Trf to A/C PAYABLE "
        "IBFT (IN-670724040,NEA",
        dict(amount="1822.00", merchant="Nepal Electricity Authority", reference="IN-670724040"),
    ),
    (
        "Siddhartha Bank",
        "SBL_Alert",
        "Dear [NAME], AC ###XXXX1234, NPR 810.00 withdrawn on 05/12/2025 18:06:50 for QR Payment to "
        "FALCHA KHAJA GHAR - falcha",
        dict(amount="810.00", merchant="FALCHA KHAJA GHAR"),
    ),
    # HSBC
    (
        "HSBC Bank",
        "HSBC",
        "HSBC: INR 50,000.00 is credited to your A/c 074-260***-006 as NEFT from CHAS A/c ***6983 of John Doe .",
        dict(amount="50000.00", type=INCOME, merchant="CHAS A/c ***6983 of John Doe", account_last4="0006"),
    ),
    (
        "HSBC Bank",
        "VM-HSBCIN",
        "HSBC: Thank you for using HSBC Debit Card XXXXX71xx for INR 305.00 on 15-Dec-25 at IKEA INDIA .",
        dict(amount="305.00", type=EXPENSE, merchant="IKEA INDIA", account_last4="71xx"),
    ),
    (
        "HSBC Bank",
        "HSBC",
        "Your HSBC creditcard xxxxx1234 used at AMAZON for INR 305.00 on 15-04-25.",
        dict(amount="305.00", type=CREDIT, merchant="AMAZON", account_last4="1234"),
    ),
    (
        "HSBC Bank",
        "HSBCIN",
        "HSBC: INR 1,234.56 is paid from your A/c 074-260***-006 to AMAZON on 20-Dec-25. "
        "Your Avl Bal is INR 98,765.44 .",
        dict(amount="1234.56", type=EXPENSE, merchant="AMAZON", account_last4="0006", balance="98765.44"),
    ),
    # State Bank of India
    (
        "State Bank of India",
        "SBICRD",
        "Rs.259.00 spent on your SBI Credit Card ending with 1234 on 15Jan26. Your available limit is Rs.1,235.00. "
        "If not done by you, call 39 02 02 02.",
        dict(amount="259.00", type=CREDIT, account_last4="1234", credit_limit="1235.00", is_from_card=True),
    ),
    (
        "State Bank of India",
        "SBICRD",
        "Your payment of Rs.1,644.55 has been credited to your SBI Credit Card ending with 5667. "
        "Your available limit is Rs.48,355.45.",
        dict(amount="1644.55", type=INCOME, account_last4="5667", credit_limit="48355.45", is_from_card=True),
    ),
    (
        "State Bank of India",
        "ATMSBI",
        "Dear Customer, transaction number 1234 for Rs.383.00 by SBI Debit Card 0000 done at merchant on 13Sep25 "
        "at 21:38:26. Your updated available balance is Rs.999999999. If not done by you, forward this SMS to "
        "7400165218/ call 1800111109/9449112211 to block card. GOI helpline for cyber fraud 1930.",
        dict(amount="383.00", type=EXPENSE, account_last4="0000"),
    ),
    (
        "State Bank of India",
        "ATMSBI",
        "Rs.500 debited from A/c X1234 on 13Sep25. Avl Bal Rs.999999999",
        dict(amount="500", type=EXPENSE, account_last4="1234"),
    ),
    # Axis
    (
        "Axis Bank",
        "AX-AXISBK-S",
        "Spent INR 131\nAxis Bank Card no. XX0818\n05-10-25 09:43:27 IST\nSwiggy Limi\n"
        "Avl Limit: INR 217162.72\nNot you? SMS BLOCK 0818 to 919951860002",
        dict(amount="131", type=CREDIT, merchant="Swiggy", account_last4="0818", credit_limit="217162.72",
             is_from_card=True),
    ),
    (
        "Axis Bank",
        "AX-AXISBK-S",
        "Spent INR 1299.00\nAxis Bank Card no. XX5678\n12-10-25 14:30:15 IST\nAmazon Pay\n"
        "Avl Limit: INR 50000.00\nNot you? SMS BLOCK 5678 to 919951860002",
        dict(amount="1299.00", type=CREDIT, merchant="Amazon", account_last4="5678", credit_limit="50000.00"),
    ),
    # IDFC First
    (
        "IDFC First Bank",
        "JM-IDFCFB-S",
        "Your A/c XX4614 debited by Rs. 1,172.06 on 15/01/26; REDBUS credited. RRN 060649915527. "
        "Available balance Rs. 9,134.15. Team IDFC FIRST Bank",
        dict(amount="1172.06", type=EXPENSE, merchant="REDBUS", account_last4="4614", balance="9134.15",
             reference="060649915527", is_from_card=False),
    ),
    (
        "IDFC First Bank",
        "BM-IDFCBK-S",
        "Your A/C XXXXXXX1234 is credited by INR 125.50 on 01/01/25 for monthly interest. New Bal :INR 15125.50",
        dict(amount="125.50", type=INCOME, merchant="Interest Credit", account_last4="1234", balance="15125.50"),
    ),
    (
        "IDFC First Bank",
        "JM-IDFCFB-S",
        "Transaction Successful! EUR 500.00 spent on your IDFC FIRST Bank Credit Card ending XX1234 at AMAZON EU "
        "on 08-FEB-2025 at 01:28 PM Avbl Limit: INR 4074.10 If not done by you, call 180010888",
        dict(amount="500.00", type=EXPENSE, merchant="AMAZON EU", account_last4="1234", currency="EUR",
             is_from_card=True),
    ),
    # Indian Bank
    (
        "Indian Bank",
        "BV-INDBNK-S",
        "Rs.2.00 credited to a/c *8175 on 07/10/2025 by a/c linked to VPA poweraccess.paytm3@axisbank "
        "(UPI Ref no 981408452805).Indian Bank",
        dict(amount="2.00", type=INCOME, merchant="poweraccess.paytm3", account_last4="8175",
             reference="981408452805"),
    ),
    (
        "Indian Bank",
        "INDBNK",
        "Rs. 2000 withdrawn from ATM at MAIN STREET BRANCH on 09/10/2025.Indian Bank",
        dict(amount="2000", type=EXPENSE, merchant="ATM - MAIN STREET BRANCH"),
    ),
    # Bandhan
    (
        "Bandhan Bank",
        "XY-BDNSMS-S",
        "INR 180.00 debited from A/c XXXXXXXXXX1234 towards UPI/DR/D123013240123/Amazon Pa Value 16-NOV-2025 . "
        "Clear Bal is INR 9999.99. Bandhan Bank",
        dict(amount="180.00", type=EXPENSE, merchant="Amazon Pa", account_last4="1234", balance="9999.99",
             reference="D123013240123"),
    ),
    (
        "Bandhan Bank",
        "XY-BDNSMS-S",
        "Dear Customer, your account XXXXXXXXXX1234 is credited with INR 3.00 on 01-OCT-2025 towards interest. "
        "Bandhan Bank",
        dict(amount="3.00", type=INCOME, merchant="Interest", account_last4="1234"),
    ),
    # Kerala Gramin
    (
        "Kerala Gramin Bank",
        "AD-KGBANK-S",
        "Your a/c no. XXXX12345 is debited for Rs.160.00 on 28/7/25 05:06 PM and credited to a/c no. XXXXX00019 "
        "(UPI Ref no 170632692557)-Kerala Gramin Bank",
        dict(amount="160.00", type=EXPENSE, merchant="UPI Transfer", account_last4="2345",
             reference="170632692557"),
    ),
    (
        "Kerala Gramin Bank",
        "BX-KGBANK-S",
        "Dear Customer, Account XXXX123 is credited with INR 3000 on 20-10-2025 08:15:26 from 7025784485@upi. "
        "UPI Ref. no. 529807237409-Kerala Gramin Bank",
        dict(amount="3000", type=INCOME, merchant="UPI Payment", account_last4="0123", reference="529807237409"),
    ),
    # Bank of Baroda
    (
        "Bank of Baroda",
        "VM-BOBTXN-S",
        "Rs.29 transferred from A/c ...5494 to:Loan Recovery Fo. Total Bal:Rs.24898.57CR. "
        "Avlbl Amt:Rs.24898.57(04-11-2025 04:03:09) - Bank of Baroda",
        dict(amount="29", type=EXPENSE, merchant="Loan Recovery Fo", account_last4="5494", balance="24898.57"),
    ),
    (
        "Bank of Baroda",
        "VM-BOBTXN",
        "Rs.80.00 Dr. from A/c XX123456 on 12-11-2024. AvlBal:Rs1234.56cx. Ref:52211012345 -Bank of Baroda",
        dict(amount="80.00", type=EXPENSE, account_last4="3456", balance="1234.56", reference="52211012345"),
    ),
    (
        "Bank of Baroda",
        "VM-BOBSMS",
        "Rs.500.00 Cr. to redacted@ybl A/c XX789012 on 15-11-2024. AvlBal:Rs5678.90. Ref:987654321 -Bank of Baroda",
        dict(amount="500.00", type=INCOME, merchant="UPI Payment", account_last4="9012", balance="5678.90",
             reference="987654321"),
    ),
    # Bank of India
    (
        "Bank of India",
        "JM-BOIIND-S",
        "BOI -  Cash Rs. 500 deposited in your account XX5468 from Cash Acceptor Machine R0807030 at  "
        "MAIN TRIMBAK ROAD ON 14-10-2025. Available balance Rs. 20100.81",
        dict(amount="500", type=INCOME, merchant="Cash Deposit", account_last4="5468", balance="20100.81"),
    ),
    (
        "Bank of India",
        "BOIIND",
        "Rs.200.00 debited A/cXX5468 and credited to SAI MISAL via UPI Ref No 315439383341 on 23Aug25. "
        "Call 18001031906, if not done by you. -BOI",
        dict(amount="200.00", type=EXPENSE, merchant="SAI MISAL", account_last4="5468", reference="315439383341"),
    ),
    # Federal
    (
        "Federal Bank",
        "AD-FEDBNK-S",
        "Digital Gold India Private Limited has received Rs 21.00 from your A/c 7990 via NEFT on "
        "10-Jan-2026 12:06:17. Ref no. FBBT260103879100 - Federal Bank",
        dict(amount="21.00", type=INVESTMENT, merchant="Digital Gold India"),
    ),
    (
        "Federal Bank",
        "VM-FEDBNK-S",
        "Nippon India Mutual Fund has received Rs 1000.00 from your A/c 3363 via NEFT on 02-Jan-2026 06:50:32. "
        "Ref no. FBBT260023158681 - Federal Bank",
        dict(amount="1000.00", type=INVESTMENT, merchant="Nippon India Mutual Fund"),
    ),
    (
        "Federal Bank",
        "CP-FEDSCP-S",
        "Yay! We've received your payment of ₹12,056.72 towards your Scapia Federal credit card. -Federal Bank",
        dict(amount="12056.72", type=TRANSFER),
    ),
    # Central Bank of India
    (
        "Central Bank of India",
        "JD-CENTBK-S",
        "Rs. 5.000 credited to your A/c xxxxxx1234 on 03/01/2026 through NEFT vide Ref No./XUTR/IN22XX...XX24 "
        "By.NEXTBILLION TECHNOLOGY PRIVATE LIMI-CBoI",
        dict(amount="5.00", type=INCOME, merchant="NEXTBILLION TECHNOLOGY PRIVATE LIMI", account_last4="1234"),
    ),
    # Equitas
    (
        "Equitas Small Finance Bank",
        "CP-EQUTAS-S",
        "INR 500.00 debited via UPI from Equitas A/c 1234 -Ref:571987071234 on 19-12-25 to JOHN DOE. "
        "Avl Bal is INR 15,000.50.Not U?Call 18001031222/SMS BLOCK UPI/BLOCK ACT 1233 to 7045030000.",
        dict(amount="500.00", type=EXPENSE, merchant="JOHN DOE", account_last4="1234", balance="15000.50",
             reference="571987071234", is_from_card=False),
    ),
    (
        "Equitas Small Finance Bank",
        "CP-EQUTAS-S",
        "INR 2,000.00 credited via UPI to Equitas A/c 9012 -Ref:123456789012 on 18-01-26 from EMPLOYER NAME. "
        "Avl Bal is INR 25,000.00.Not U?Call 18001031222.",
        dict(amount="2000.00", type=INCOME, merchant="EMPLOYER NAME", account_last4="9012", balance="25000.00"),
    ),
    # JioPay
    (
        "JioPay",
        "JIOPAY",
        "Recharge Successful for Jio Number : 9876543210. Rs. 249.00 paid. Transaction ID : BR000CAUBYON",
        dict(amount="249.00", type=CREDIT, merchant="Jio Recharge - 9876****", reference="BR000CAUBYON",
             is_from_card=True),
    ),
    (
        "JioPay",
        "JIOPAY",
        "Bill Payment of Rs. 1,234.56 for Electricity bill successful. Rs. 1,234.56 paid.",
        dict(amount="1234.56", type=CREDIT, merchant="Electricity Bill"),
    ),
]

_DECIMAL_FIELDS = ("amount", "balance", "credit_limit")


def _sample_id(sample):
    bank, sender, body, _ = sample
    return f"{bank}:{body[:40]}"


@pytest.mark.parametrize("bank, sender, body, expected", SAMPLES, ids=[_sample_id(s) for s in SAMPLES])
def test_institution_sample(bank, sender, body, expected):
    parser = get_parser_by_name(bank)
    assert parser is not None
    assert parser.can_handle(sender)

    txn = parser.parse(body, sender, TIMESTAMP)

    assert txn is not None
    assert txn.bank_name == bank
    for field, value in expected.items():
        if field in _DECIMAL_FIELDS:
            value = Decimal(value)
        assert getattr(txn, field) == value, field


@pytest.mark.parametrize(
    "body",
    [
        "Your Dhanlaxmi Bank OTP is 123456. Do not share this code with anyone. Valid for 5 minutes.",
        "Dhanlaxmi Bank: Get 5% cashback on all UPI transactions this festive season!",
        "Your Dhanlaxmi Bank account balance is INR 50,000.00 as of 28-NOV-2025.",
    ],
)
def test_dhanlaxmi_non_transactions_are_skipped(body):
    assert get_parser_by_name("Dhanlaxmi Bank").parse(body, "VM-DHANBK", TIMESTAMP) is None


class TestHSBCNeft:
    OUTGOING = (
        "HSBC: Dear HSBC Customer, your NEFT transaction with reference number HSBCN00106726185 for "
        "INR 150,000.00 has been credited to the HDFC A/c XXXXXXXXXX6956 of AKASH KEDIA on 01-01-2026 "
        "at 15:36:47 ."
    )
    INCOMING = (
        "HSBC: A/c 074-260***-006 is credited with INR 5000.00 on 27NOV at 06.33.02 with UTR CHASH00007392391 "
        "as NEFT from CHAS A/c ***6983 of John Doe . Your Avl Bal is INR 15000.50."
    )

    def test_leg_credited_at_another_bank_is_a_transfer(self):
        txn = get_parser_by_name("HSBC Bank").parse(self.OUTGOING, "VM-HSBCIN-S", TIMESTAMP)

        assert txn.amount == Decimal("150000.00")
        assert txn.type is TransactionType.TRANSFER
        assert txn.merchant == "AKASH KEDIA"

    def test_leg_credited_to_the_hsbc_account_is_income(self):
        txn = get_parser_by_name("HSBC Bank").parse(self.INCOMING, "HSBC", TIMESTAMP)

        assert txn.amount == Decimal("5000.00")
        assert txn.type is TransactionType.INCOME
        assert txn.merchant == "CHAS A/c ***6983 of John Doe"
        assert txn.account_last4 == "0006"
        assert txn.balance == Decimal("15000.50")
        assert txn.reference == "CHASH00007392391"


class TestIndianCreditsWithBalance:
    """Credits that quote the resulting balance are still transactions."""

    @pytest.mark.parametrize(
        "bank, sender, body",
        [
            (
                "Standard Chartered Bank",
                "JK-SCBANK-S",
                "Dear Customer, there is an NEFT credit of INR 48,796.00 in your account 123xxxx7655 on 1/11/2025."
                "Available Balance:INR 97,885.05 -StanChart",
            ),
            (
                "South Indian Bank",
                "SIBSMS",
                "UPI Credit:INR Rs.15000.00 in A/c X7377. Info: UPI/TGRB/190200588907/ Sham Ak on 26-12-25 "
                "19:02:01.Final balance is Rs.34567.67 -South Indian Bank",
            ),
        ],
    )
    def test_credit_passes_the_gate(self, bank, sender, body):
        parser = get_parser_by_name(bank)

        assert parser.is_transaction_message(body)
        assert parser.parse(body, sender, TIMESTAMP).type is TransactionType.INCOME
