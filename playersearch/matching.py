"""Fuzzy name matching and roster filtering."""

import logging

from playersearch import Player
from playersearch.distance import edit_distance
from playersearch.text import normalize_text, split_terms

log = logging.getLogger(__name__)

# Query terms up to this length tolerate fewer edits
SHORT_TERM_LENGTH = 4
SHORT_TERM_MAX_EDITS = 1
LONG_TERM_MAX_EDITS = 2


def term_threshold(term: str) -> int:
    """Return the maximum edit distance tolerated for a query term."""
    if len(term) > SHORT_TERM_LENGTH:
        return LONG_TERM_MAX_EDITS
    return SHORT_TERM_MAX_EDITS


def _coerce(value, argument: str) -> str:
    """Map None to an empty string and reject other non-strings."""
    if value is None:
        return ''
    if not isinstance(value, str):
        raise TypeError(
            f"{argument} must be a string, not {type(value).__name__}"
        )
    return value


def fuzzy_match(
    target_text: str,
    query: str,
    use_fuzzy_fallback: bool = True,
) -> bool:
    """Decide whether a search query matches a label.

    Uses a two-phase approach:
    1. Exact phase: every query term is a substring of the target
    2. Fuzzy phase: every query term is within a few edits of some
       target term (only if ``use_fuzzy_fallback`` is set)

    Both texts are accent- and case-normalized first. Query terms are
    tested independently, so word order does not matter. An empty or
    whitespace-only query matches everything.

    Args:
        target_text: Label to test, e.g. a full player name.
        query: User input.
        use_fuzzy_fallback: Enable the Levenshtein fallback.

    Returns:
        True if the query matches the target.

    Raises:
        TypeError: If an argument is neither a string nor None.
    """
    target_text = _coerce(target_text, 'target_text')
    query = _coerce(query, 'query')
    if not query:
        return True

    target_norm = normalize_text(target_text)
    search_terms = split_terms(normalize_text(query))

    # Phase 1: substring match
    if all(term in target_norm for term in search_terms):
        return True

    # Phase 2: per-term nearest neighbour
    if use_fuzzy_fallback:
        target_terms = split_terms(target_norm)
        return all(
            any(
                edit_distance(term, target_term) <= term_threshold(term)
                for target_term in target_terms
            )
            for term in search_terms
        )

    return False


def filter_players(
    players: list[Player],
    query: str,
    use_fuzzy_fallback: bool = True,
) -> list[Player]:
    """Keep the players whose display name matches the query.

    Input order is preserved; no ranking is applied.

    Args:
        players: Roster to filter.
        query: User input. An empty query keeps every player.
        use_fuzzy_fallback: Enable the Levenshtein fallback.

    Returns:
        Matching players.
    """
    matches = [
        p for p in players
        if fuzzy_match(p.display_name, query, use_fuzzy_fallback)
    ]
    log.debug(
        "Suche %r: %d von %d Spielern gefunden",
        query, len(matches), len(players),
    )
    return matches
