"""Canonical form for email addresses stored and looked up by the forms."""


def normalize_email(value: str) -> str:
    """Trim and lowercase, so sign-ups and lookups that differ only in case match."""
    return value.strip().lower()
