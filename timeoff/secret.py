import random
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def _base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def generate_secret(rng: random.Random = None, now_ms: int = None) -> str:
    """Return a fresh anti-automation token.

    Random base-36 digits followed by the current time in milliseconds, also
    base-36. Unique in practice, not meant to be unguessable.
    """
    rng = rng or random
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return _base36(rng.getrandbits(53)) + _base36(now_ms)
