# mtn/utils/text_utils.py
from decimal import Decimal
from typing import Union


def format_amount(amount: Union[Decimal, float, int]) -> str:
    """Converte um valor para a forma mais curta, sem notação científica.
    Ex: Decimal("50") -> "50"
    Ex: Decimal("12.50") -> "12.5"
    Ex: Decimal("1000") -> "1000" (e não "1E+3")
    """
    value = Decimal(str(amount)).normalize()
    text = format(value, "f")
    return "0" if text in ("-0", "") else text


def format_brl(value: Union[Decimal, float, int, str, None]) -> str:
    """Formata um valor no padrão brasileiro: 1234.5 -> 'R$ 1.234,50'."""
    if value is None or value == "":
        value = 0
    quantized = Decimal(str(value)).quantize(Decimal("0.01"))
    us_style = f"{quantized:,.2f}"
    # Troca separadores: ',' de milhar vira '.', '.' decimal vira ','
    return "R$ " + us_style.replace(",", "_").replace(".", ",").replace("_", ".")
