"""
Tests for price values and display formatting.
"""

from decimal import Decimal

from payments.price import Price, format_price, quantize_amount


class TestFormatPrice:

    def test_usd(self):
        assert format_price(Price(Decimal('19.99'), 'USD')) == '$19.99'

    def test_rounds_to_minor_units(self):
        assert format_price(Price(Decimal('19.990000'), 'USD')) == '$19.99'
        assert format_price(Price(Decimal('5.005'), 'USD')) == '$5.01'

    def test_thousands_separator(self):
        assert format_price(Price(Decimal('1234.5'), 'EUR')) == '€1,234.50'

    def test_zero_decimal_currency(self):
        assert format_price(Price(Decimal('1500'), 'JPY')) == '¥1,500'

    def test_unknown_currency_uses_code(self):
        assert format_price(Price(Decimal('10'), 'CHF')) == 'CHF 10.00'

    def test_negative_amount(self):
        assert format_price(Price(Decimal('-3.5'), 'USD')) == '-$3.50'


class TestPrice:

    def test_normalizes_number_and_currency(self):
        price = Price('19.99', 'usd')

        assert price.number == Decimal('19.99')
        assert price.currency_code == 'USD'
        assert str(price) == '19.99 USD'


class TestQuantizeAmount:

    def test_half_cent_rounds_up(self):
        assert quantize_amount(Decimal('19.985')) == Decimal('19.99')
        assert quantize_amount(Decimal('19.975')) == Decimal('19.98')

    def test_pads_to_cents(self):
        assert str(quantize_amount(Decimal('20'))) == '20.00'

    def test_agrees_with_display(self):
        price = Price(Decimal('0.125'), 'USD')

        assert format_price(price) == f"${quantize_amount(price.number)}"
