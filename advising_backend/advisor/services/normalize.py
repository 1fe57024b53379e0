_BOM = "\ufeff"


def strip_bom(value: str) -> str:
    if value.startswith(_BOM):
        return value[len(_BOM):]
    return value


def normalize_code(raw: str) -> str:
    """Canonical course code: ASCII letters and digits only, uppercased.

    ``" cs\\u00a0101 "`` becomes ``"CS101"``. The result may be empty, which
    callers treat as an invalid code.
    """
    value = strip_bom(raw).strip()
    return "".join(ch for ch in value if ch.isascii() and ch.isalnum()).upper()
