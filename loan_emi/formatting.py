import copy
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import lru_cache

from babel import Locale
from babel.numbers import format_currency as babel_format_currency

from loan_emi import config


@lru_cache(maxsize=None)
def _whole_currency_pattern(locale: str):
    # the locale's own currency pattern, minus the fraction digits
    pattern = copy.copy(Locale.parse(locale).currency_formats["standard"])
    pattern.frac_prec = (0, 0)
    return pattern


def format_currency(amount: float, currency: str = config.CURRENCY, locale: str = config.LOCALE) -> str:
    """
    Locale-aware currency string with no decimal places, e.g. ₹20,82,776 for en_IN.
    Halves round away from zero.
    """
    value = Decimal(str(amount))
    with localcontext() as ctx:
        # enough digits to hold the integer part of any finite float
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        whole = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return babel_format_currency(
            whole,
            currency,
            format=_whole_currency_pattern(locale),
            locale=locale,
            currency_digits=False,
        )
