"""Metacritic score normalizer."""

from scorebot.etl.types import SourceScore


def normalize_metascore(text: str) -> SourceScore:
    """Convert a raw metascore such as "74" to "74/100".

    Args:
        text: Review score text.

    Returns:
        Score out of 100, or None for empty or placeholder text ("tbd").
    """
    value = text.strip()
    if not value.isdigit():
        return None
    return f"{value}/100"
