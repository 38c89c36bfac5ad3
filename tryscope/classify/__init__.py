from .kinds import first_match, kind_matches, matches_any, where
from .policy import DEFAULT_POLICY, ClassifyPolicy, Wrapper

__all__ = (
    "DEFAULT_POLICY",
    "ClassifyPolicy",
    "Wrapper",
    "first_match",
    "kind_matches",
    "matches_any",
    "where",
)
