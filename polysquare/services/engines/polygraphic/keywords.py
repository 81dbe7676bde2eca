import random
from typing import Any

from polysquare.core.exceptions import InvalidKeyError
from polysquare.services.squares.key_matrix import ALPHABET


def parse_keyword_pair(key: str | dict[str, Any]) -> tuple[str, str]:
    """
    Parse a key made of two keywords.

    Accepts {"key1": ..., "key2": ...} (or keyword1/keyword2) or a
    comma-separated string "KEY1,KEY2".
    """
    if isinstance(key, dict):
        key1 = key.get("key1", key.get("keyword1", ""))
        key2 = key.get("key2", key.get("keyword2", ""))
        if not isinstance(key1, str) or not isinstance(key2, str):
            raise InvalidKeyError("Keywords must be strings", {"key": key})
    elif isinstance(key, str):
        parts = key.split(",")
        if len(parts) != 2:
            raise InvalidKeyError(
                "Expected two comma-separated keywords",
                {"key": key},
            )
        key1, key2 = parts[0].strip(), parts[1].strip()
    else:
        raise InvalidKeyError("Invalid key format", {"key": key})

    return key1.upper().replace("J", "I"), key2.upper().replace("J", "I")


def random_keyword(min_length: int = 5, max_length: int = 10) -> str:
    """Random keyword drawn from the 25-letter alphabet."""
    length = random.randint(min_length, max_length)
    return "".join(random.choice(ALPHABET) for _ in range(length))


def random_keyword_pair() -> dict[str, str]:
    """Random two-keyword key in the {"key1", "key2"} form."""
    return {"key1": random_keyword(), "key2": random_keyword()}
