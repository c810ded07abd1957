"""Players and the top-level game state."""

from __future__ import annotations

from hexlayers.board import HexMap
from hexlayers.unit import Unit


class Player:
    """A named player owning an ordered list of units."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._units: list[Unit | None] = []

    def add_unit(self, unit: Unit | None) -> None:
        """Append a unit to the player's army."""
        self._units.append(unit)

    @property
    def unit_count(self) -> int:
        """Number of units the player has."""
        return len(self._units)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._units):
            raise IndexError(f"index out of bounds: {index}")

    def unit_at(self, index: int) -> Unit | None:
        """Return the unit at the given index."""
        self._check_index(index)
        return self._units[index]

    def set_unit_at(self, index: int, unit: Unit | None) -> None:
        """Replace the unit at the given index; None is allowed."""
        self._check_index(index)
        self._units[index] = unit

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, units={len(self._units)})"


class Game:
    """The main game state: a map and the players taking part."""

    def __init__(self) -> None:
        self.game_map: HexMap | None = None
        self.players: list[Player] = []

    def set_map(self, game_map: HexMap | None) -> None:
        """Set the map the game is played on."""
        self.game_map = game_map

    def add_player(self, player: Player) -> None:
        """Add a player; the same player may be added more than once."""
        self.players.append(player)