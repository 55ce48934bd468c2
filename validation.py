# validation.py
# Leitura e validação dos valores digitados nos formulários

import math


def parse_number(raw):
    """
    Converte o valor de um campo em float.
    Campo vazio, texto não numérico, NaN ou infinito -> None.
    Aceita vírgula decimal ("12,5").
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", ".")
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None

    if not math.isfinite(value):
        return None
    return value


def parse_count(raw):
    """Quantidade inteira; casas decimais são truncadas ("4.7" -> 4)."""
    value = parse_number(raw)
    if value is None:
        return None
    return int(value)


def parse_positive(raw):
    value = parse_number(raw)
    if value is None or value <= 0:
        return None
    return value


def is_in_catalog(value, catalog):
    return value in catalog
