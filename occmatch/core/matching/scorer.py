"""Fuzzy word-overlap score between a free-text occupation and a catalog title."""

from ..models.occupation import OccupationRecord


def calculate_match_score(client_occupation: str, occupation: OccupationRecord | str) -> float:
    """Score how well a free-text occupation name matches a catalog title.

    Both strings are lowercased and split on whitespace. An input word counts
    as matched when some title word contains it, or it contains some title
    word. The count is divided by the longer of the two word lists.

    Args:
        client_occupation: Occupation as typed by the client
        occupation: Catalog record or its title

    Returns:
        Score in [0, 100]
    """
    title = occupation.title if isinstance(occupation, OccupationRecord) else occupation
    client_words = (client_occupation or "").lower().split()
    title_words = (title or "").lower().split()

    denominator = max(len(client_words), len(title_words))
    if denominator == 0:
        return 0.0

    matches = sum(
        1
        for word in client_words
        if any(word in title_word or title_word in word for title_word in title_words)
    )
    return matches / denominator * 100
