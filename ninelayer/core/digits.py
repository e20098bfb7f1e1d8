def extract_digits(raw: str) -> str:
    """Canonical 3-digit form of a raw draw number.

    "1,2,3,4" -> "234", "1234" -> "234". Anything shorter than four
    characters without a comma is passed through untouched.
    """
    if not raw:
        return ""
    if "," in raw:
        parts = [p.strip() for p in raw.split(",")]
        if len(parts) >= 4:
            return "".join(parts[1:4])
    if len(raw) >= 4:
        return raw[-3:]
    return raw


def parse_digits(text: str) -> list[int]:
    # non-digit characters are skipped, not rejected
    return [int(c) for c in text if c in "0123456789"]
