"""IMDb score normalizer."""

from scorebot.etl.types import SourceScore


def normalize_rating(rating: str, max_score: str) -> SourceScore:
    """Join the displayed rating and its scale suffix.

    Both pieces are kept exactly as displayed, e.g. "8.1" and "/10"
    give "8.1/10".

    Args:
        rating: Rating text.
        max_score: Scale text.

    Returns:
        Concatenated score, or None if either piece is empty.
    """
    if not rating or not max_score:
        return None
    return f"{rating}{max_score}"
