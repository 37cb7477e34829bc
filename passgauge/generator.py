"""
passgauge.generator
Random password and passphrase generators using Python's secrets module.
"""

from secrets import choice
import string


SYMBOLS = "!@#$%^&*()_+~`|}{[]:;?><,./-="
CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits + SYMBOLS

WORDS = (
    "correct", "horse", "battery", "staple", "blue", "sky", "mountain", "river",
    "cosmic", "nebula", "proton", "cyber", "security", "audit", "zero", "trust",
    "crypto", "ledger", "vector", "pixel",
)

def generate_random_password(length: int = 16) -> str:
    """
    Draw ``length`` characters uniformly (with replacement) from CHARSET.
    """
    if length <= 0:
        raise ValueError("length must be > 0")
    return "".join(choice(CHARSET) for _ in range(length))


def generate_passphrase(word_count: int = 4) -> str:
    """Hyphen-join ``word_count`` words drawn uniformly from WORDS."""
    if word_count <= 0:
        raise ValueError("word_count must be > 0")
    return "-".join(choice(WORDS) for _ in range(word_count))
