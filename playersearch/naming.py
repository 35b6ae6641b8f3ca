"""Display names and homonym-aware short names for roster announcements."""

from playersearch import Player
from playersearch.matching import fuzzy_match


def format_player_name(first_name: str, last_name: str) -> str:
    """Format a full player name as 'First Last'."""
    return f'{first_name} {last_name}'


def _initial(name: str) -> str:
    return name[:1].upper()


def find_homonyms(player: Player, roster: list[Player]) -> list[Player]:
    """Return the other roster players whose first name matches this one's.

    First names are compared with the fuzzy matcher, so 'Theo' and 'Théo'
    (or 'Téo') count as the same first name. The player itself is
    recognized by identity, not by ID.

    Args:
        player: Player to look up.
        roster: All players, possibly including ``player`` itself.

    Returns:
        Homonyms of ``player``, in roster order.
    """
    return [
        other for other in roster
        if other is not player
        and fuzzy_match(other.first_name, player.first_name)
    ]


def short_display_name(player: Player, roster: list[Player]) -> str:
    """Return the shortest unambiguous name for a player.

    - Label-only entries (fine items) or no first name: display name
    - No homonym in the roster: first name only
    - Homonyms, none sharing the last-name initial: 'First L.'
    - Otherwise: full name

    Args:
        player: Player to name.
        roster: All players, possibly including ``player`` itself.

    Returns:
        Short display name.
    """
    if player.name or not player.first_name:
        return player.display_name

    homonyms = find_homonyms(player, roster)
    if not homonyms:
        return player.first_name

    initial = _initial(player.last_name)
    if any(_initial(other.last_name) == initial for other in homonyms):
        return format_player_name(player.first_name, player.last_name)
    return f'{player.first_name} {initial}.'


def join_names(names: list[str], conjunction: str = 'et') -> str:
    """Join names as 'A, B et C'."""
    if not names:
        return ''
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} {conjunction} {names[-1]}"
