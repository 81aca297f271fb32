"""Resolve which crops to evaluate from a selection mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from harvest_planner.reference.crops import CROP_PROFILES
from harvest_planner.schemas import SelectionMode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from harvest_planner.schemas import CropProfile


def resolve_selection(
    mode: SelectionMode | str,
    chosen: Iterable[str] = (),
    registry: Mapping[str, CropProfile] = CROP_PROFILES,
) -> list[str]:
    """
    Turn a mode and the user's picks into the list of crops to evaluate.

    - ``all``: every registered crop; picks are ignored.
    - ``multiple``: the picks in order, duplicates dropped (may be empty).
    - ``single``: the first pick, or the first registered crop if none.

    Raises:
        ValueError: On an unknown mode or an unregistered crop name.
    """
    mode = SelectionMode(mode)
    if mode is SelectionMode.ALL:
        return list(registry)

    picks = list(dict.fromkeys(chosen))
    unknown = [crop for crop in picks if crop not in registry]
    if unknown:
        msg = f"Unknown crop(s): {', '.join(unknown)}"
        raise ValueError(msg)

    if mode is SelectionMode.SINGLE:
        return picks[:1] or list(registry)[:1]
    return picks
