"""Core module for player-search."""

from dataclasses import dataclass, field


@dataclass
class Player:
    """Represents a roster entry that can be searched by name."""

    player_id: str
    first_name: str
    last_name: str
    name: str = ''    # Label override (fine types and other non-player items)

    @property
    def display_name(self) -> str:
        """Label shown in lists and matched against search queries."""
        if self.name:
            return self.name
        return f'{self.first_name} {self.last_name}'.strip()


@dataclass
class SearchReport:
    """Result of filtering a roster with a single query."""

    query: str
    use_fuzzy_fallback: bool
    total: int            # Number of roster entries searched
    matches: list[Player] = field(default_factory=list)
