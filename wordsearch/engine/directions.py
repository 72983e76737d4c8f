"""Resolution of caller direction selections into step vectors."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Set, Tuple, Union

from ..core.constants import Direction
from ..core.exceptions import NoDirectionsSelected
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DirectionSelection = Union[Mapping[str, bool], Iterable[Union[str, Direction]], None]

ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


def parse_direction(name: Union[str, Direction]) -> Optional[Direction]:
    """Return the Direction for a stored name, or ``None`` if unknown."""

    if isinstance(name, Direction):
        return name
    try:
        return Direction(name)
    except ValueError:
        return None


def resolve_directions(allowed: DirectionSelection) -> List[Direction]:
    """Turn a direction selection into a non-empty list of directions.

    ``allowed`` may be a mapping of toggles (``{"right": True, ...}``), an
    iterable of names or members, or ``None`` for all eight. The result is in
    canonical order so equal selections behave identically under a seed.
    """

    if allowed is None:
        return list(ALL_DIRECTIONS)

    if isinstance(allowed, Mapping):
        requested = [name for name, enabled in allowed.items() if enabled]
    elif isinstance(allowed, (str, Direction)):
        requested = [allowed]
    else:
        requested = list(allowed)

    enabled: Set[Direction] = set()
    for name in requested:
        direction = parse_direction(name)
        if direction is None:
            LOGGER.warning("Ignoring unknown direction %r", name)
            continue
        enabled.add(direction)

    if not enabled:
        raise NoDirectionsSelected("Select at least one direction for the words")

    return [direction for direction in ALL_DIRECTIONS if direction in enabled]


def direction_vectors(directions: Iterable[Direction]) -> List[Tuple[int, int]]:
    return [direction.step for direction in directions]
