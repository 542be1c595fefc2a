import re

FARSI_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
ENGLISH_DIGITS = "0123456789"

_TO_ENGLISH = str.maketrans(
    FARSI_DIGITS + ARABIC_INDIC_DIGITS + "٫",
    ENGLISH_DIGITS * 2 + ".",
)
_TO_FARSI = str.maketrans(ENGLISH_DIGITS, FARSI_DIGITS)

_FARSI_CHARS_RE = re.compile("[\u0600-\u06FF\u0750-\u077F]")
_INT_PREFIX_RE = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))")


def to_english_digits(text: str) -> str:
    return text.translate(_TO_ENGLISH)


def to_farsi_digits(value: str | int | float) -> str:
    return str(value).translate(_TO_FARSI)


def parse_farsi_int(text: str) -> int:
    """Parse the leading integer of *text*, accepting Farsi and Arabic digits.

    ``"۱۲۳"`` and ``"123"`` both give 123; trailing non-digits are ignored.
    Raises ValueError when the text does not start with a number.
    """
    match = _INT_PREFIX_RE.match(to_english_digits(text))
    if not match:
        raise ValueError(f"Not a number: {text!r}")
    return int(match.group(1))


def parse_farsi_float(text: str) -> float:
    match = _FLOAT_PREFIX_RE.match(to_english_digits(text))
    if not match:
        raise ValueError(f"Not a number: {text!r}")
    return float(match.group(1))


def contains_farsi(text: str | None) -> bool:
    if not text or not isinstance(text, str):
        return False
    return _FARSI_CHARS_RE.search(text) is not None


def text_direction(text: str | None) -> str:
    return "rtl" if contains_farsi(text) else "ltr"
