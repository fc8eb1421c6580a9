# utils/number_words.py
ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
TEENS = ["Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
         "Seventeen", "Eighteen", "Nineteen"]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

SUFFIX = "Taka Only"


def _chunk_words(num: int) -> str:
    """0..999 -> words ('' for 0)"""
    parts = []
    if num >= 100:
        parts.append(f"{ONES[num // 100]} Hundred")
        num %= 100
    if num >= 20:
        parts.append(TENS[num // 10])
        num %= 10
    elif num >= 10:
        parts.append(TEENS[num - 10])
        num = 0
    if num > 0:
        parts.append(ONES[num])
    return " ".join(parts).strip()


def to_words(amount: int) -> str:
    """
    1250 -> 'One Thousand Two Hundred Fifty Taka Only'

    Handles 0..999,999 (a thousands chunk and a remainder chunk).
    """
    if amount == 0:
        return f"Zero {SUFFIX}"

    parts = []
    thousands, rest = divmod(amount, 1000)
    if thousands > 0:
        parts.append(f"{_chunk_words(thousands)} Thousand")
    rest_words = _chunk_words(rest)
    if rest_words:
        parts.append(rest_words)
    return " ".join(parts) + f" {SUFFIX}"
