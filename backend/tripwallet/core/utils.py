"""
Utility functions for the application.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union
from babel.numbers import format_currency as babel_format_currency

CURRENCY = "INR"
LOCALE = "en_IN"


def format_currency(amount: Union[int, float, Decimal]) -> str:
    """
    Format an amount as Indian rupees for display, e.g. 150000 -> '₹1,50,000'.
    Rounds half up to whole rupees; this is the only place figures are rounded.
    """
    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return babel_format_currency(
        rounded, CURRENCY, locale=LOCALE, format="¤#,##,##0", currency_digits=False
    )
