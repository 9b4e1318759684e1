"""Random alias generation for nodes registered without one."""

import secrets

DEFAULT_ALIAS_PREFIX = "node_"
DEFAULT_ALIAS_LENGTH = 20
MIN_ALIAS_LENGTH = 20


def random_alias(length: int = DEFAULT_ALIAS_LENGTH, prefix: str = DEFAULT_ALIAS_PREFIX) -> str:
    """
    Generate a fresh node alias.

    Args:
        length: Number of hex characters after the prefix (4 bits each)
        prefix: Fixed readable prefix, must start with a letter or underscore

    Returns:
        ``prefix`` followed by ``length`` random hex characters

    Example:
        >>> random_alias()
        'node_3f9c0a71be54d2e8a1c7'
    """
    if length < MIN_ALIAS_LENGTH or length % 2:
        raise ValueError(f"length must be an even number >= {MIN_ALIAS_LENGTH}, got {length}")
    return prefix + secrets.token_hex(length // 2)
