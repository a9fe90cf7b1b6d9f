from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

CURRENCY_SYMBOLS = {
    'USD': '$',
    'CAD': 'CA$',
    'AUD': 'A$',
    'EUR': '€',
    'GBP': '£',
    'INR': '₹',
    'JPY': '¥',
}

# ISO 4217 currencies without minor units
ZERO_DECIMAL_CURRENCIES = {'JPY', 'KRW', 'VND'}

CENT = Decimal('0.01')


@dataclass(frozen=True)
class Price:
    """An amount of money in a given currency"""
    number: Decimal
    currency_code: str

    def __post_init__(self):
        object.__setattr__(self, 'number', Decimal(str(self.number)))
        object.__setattr__(self, 'currency_code', self.currency_code.upper())

    def __str__(self):
        return f"{self.number} {self.currency_code}"


def quantize_amount(number, places: Decimal = CENT) -> Decimal:
    """
    Round an amount to the given minor unit, halves away from zero.

    Used for both displayed and charged amounts.
    """
    return Decimal(str(number)).quantize(places, rounding=ROUND_HALF_UP)


def format_price(price: Price) -> str:
    """
    Format a price for display (e.g., '$19.99', '€5.00', 'CHF 10.00').

    Currencies without a known symbol fall back to the ISO code.
    """
    places = Decimal('1') if price.currency_code in ZERO_DECIMAL_CURRENCIES else CENT
    number = quantize_amount(price.number, places)
    sign = '-' if number < 0 else ''
    amount = f"{abs(number):,}"

    symbol = CURRENCY_SYMBOLS.get(price.currency_code)
    if symbol:
        return f"{sign}{symbol}{amount}"
    return f"{sign}{price.currency_code} {amount}"
