"""Text palindromes that ignore case and punctuation."""


def normalize(s: str) -> str:
    """Keep only ASCII letters and digits of ``s``, lower-cased."""
    return "".join(c.lower() for c in s if c.isascii() and c.isalnum())


def is_palindrome(s: str) -> bool:
    """Return True if the normalized form of ``s`` reads the same both ways."""
    normalized = normalize(s)
    return normalized == normalized[::-1]