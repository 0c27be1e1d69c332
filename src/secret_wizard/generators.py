"""Value generators for passwords, passphrases and PINs.

All generators draw from the ``secrets`` module. They are reached through
a single dispatch point, :func:`generate`, which takes a GenerationRequest.
"""

import secrets
import string
from functools import lru_cache

from icecream import ic
from xkcdpass import xkcd_password

from secret_wizard.exceptions import ValidationError
from secret_wizard.models import GenerationRequest, GeneratorStrategy

ALPHANUMERIC = string.ascii_letters + string.digits
SYMBOLS = "~!@#$%^&*()_+`-={}|[]\\:\"<>?,./"
DIGITS = "0123456789"

# Keep passphrase words short enough to type and long enough to matter
_MIN_WORD_LENGTH = 4
_MAX_WORD_LENGTH = 8


@lru_cache(maxsize=1)
def _wordlist() -> tuple[str, ...]:
    wordfile = xkcd_password.locate_wordfile()
    words = xkcd_password.generate_wordlist(
        wordfile=wordfile,
        min_length=_MIN_WORD_LENGTH,
        max_length=_MAX_WORD_LENGTH,
        valid_chars="[a-z]",
    )
    return tuple(words)


def _require_positive(value: int, what: str) -> None:
    if value < 1:
        raise ValidationError(f"{what} must be at least 1, got {value}", operation="generate", target=what)


def generate_passphrase(words: int = 4) -> str:
    """Generate a memorable passphrase.

    Args:
        words: Number of dictionary words to combine.

    Returns:
        The capitalized words joined by single spaces.

    """
    _require_positive(words, "word count")
    wordlist = _wordlist()
    return " ".join(secrets.choice(wordlist).capitalize() for _ in range(words))


def generate_charset(length: int, charset: str) -> str:
    """Generate a string of ``length`` characters drawn uniformly from ``charset``."""
    _require_positive(length, "length")
    return "".join(secrets.choice(charset) for _ in range(length))


def generate_password(length: int = 24, symbols: bool = False) -> str:
    """Generate a random alphanumeric password, optionally with symbols."""
    charset = ALPHANUMERIC + SYMBOLS if symbols else ALPHANUMERIC
    return generate_charset(length, charset)


def generate_pin(length: int = 4) -> str:
    """Generate a numeric PIN."""
    return generate_charset(length, DIGITS)


def generate(request: GenerationRequest) -> str:
    """Generate a value according to the request's strategy.

    Args:
        request: Strategy tag plus parameters.

    Returns:
        The generated value.

    Raises:
        ValidationError: If the requested length or word count is below 1.

    """
    ic(request.strategy, request.length)

    match request.strategy:
        case GeneratorStrategy.PASSPHRASE:
            return generate_passphrase(request.length)
        case GeneratorStrategy.RANDOM_CHARSET:
            return generate_password(request.length, request.symbols)
        case GeneratorStrategy.NUMERIC_PIN:
            return generate_pin(request.length)
