"""Rotten Tomatoes score normalizer."""

from scorebot.etl.types import SourceScore


def normalize_tomatometer(text: str) -> SourceScore:
    """Convert a percentage such as "81%" to "81/100".

    Args:
        text: Critics score text from the film page.

    Returns:
        Score out of 100, or None if the text is not an integer percentage.
    """
    value = text.strip().removesuffix("%")
    try:
        score = int(value)
    except ValueError:
        return None
    return f"{score}/100"
