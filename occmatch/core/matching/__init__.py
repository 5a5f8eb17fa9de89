from .matcher import ASSUMED_ENGLISH, match_client_to_anzsco
from .scorer import calculate_match_score

__all__ = ["ASSUMED_ENGLISH", "calculate_match_score", "match_client_to_anzsco"]
