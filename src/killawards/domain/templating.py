"""Placeholder substitution for reward commands."""

from __future__ import annotations

from .models import Player, Vector3

GRID_CELL_SIZE = 146.3


def column_label(index: int) -> str:
    """Return the spreadsheet-style column label for a zero-based index."""

    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


def position_to_grid(position: Vector3, world_size: int) -> str:
    """Return the map grid cell (e.g. ``"D12"``) containing ``position``.

    The map is centred on the origin; columns grow eastwards along ``x``
    and rows grow southwards from the northern edge along ``z``.
    """

    half = world_size / 2
    last_cell = int(world_size // GRID_CELL_SIZE)
    column = min(last_cell, max(0, int((position.x + half) // GRID_CELL_SIZE)))
    row = min(last_cell, max(0, int((half - position.z) // GRID_CELL_SIZE)))
    return f"{column_label(column)}{row}"


def _format_coordinate(value: float) -> str:
    return f"{value:g}"


def substitute_placeholders(template: str, player: Player, *, world_size: int) -> str:
    """Replace the fixed placeholder tokens in ``template``.

    Substitution is literal string replacement in a fixed order; unknown
    ``{Tokens}`` are left untouched.
    """

    position = player.position
    replacements = (
        ("{PlayerId}", str(int(player.id))),
        ("{PlayerName}", player.display_name),
        ("{PositionX}", _format_coordinate(position.x)),
        ("{PositionY}", _format_coordinate(position.y)),
        ("{PositionZ}", _format_coordinate(position.z)),
        ("{Grid}", position_to_grid(position, world_size)),
    )
    for token, value in replacements:
        template = template.replace(token, value)
    return template
