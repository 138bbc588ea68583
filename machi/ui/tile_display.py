"""Tile display formatting with colors for terminal output."""

from rich.text import Text

from machi.core.tile import Tile, TileSuit


SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
}


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object colored by suit."""
    style = f"bold {SUIT_COLORS[tile.suit]}"
    if highlight:
        style += " on white"
    return Text(f"[{tile.name}]", style=style)


def tile_to_simple_str(tile: Tile) -> str:
    """Plain string representation of a tile (stable, for logging)."""
    return tile.name


def tiles_to_rich_text(tiles: list, separator: str = " ", highlight: bool = False) -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile, highlight))
    return result
