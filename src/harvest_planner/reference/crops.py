"""Harvest thresholds per crop.

Temperatures are daily maxima in Celsius, humidity is relative humidity in
percent averaged over the daytime window.
"""

from __future__ import annotations

from types import MappingProxyType

from harvest_planner.schemas import CropProfile

CROP_PROFILES: MappingProxyType[str, CropProfile] = MappingProxyType(
    {
        "Wheat": CropProfile(
            optimal_humidity_max=60,
            optimal_temp_min=22,
            optimal_temp_max=26,
            advisory="Keep grain moisture below 18 % to avoid lodging and quality losses.",
        ),
        "Maize": CropProfile(
            optimal_humidity_max=20,
            optimal_temp_min=15,
            optimal_temp_max=30,
            advisory="Mould risk rises with high air humidity.",
        ),
        "Rapeseed": CropProfile(
            optimal_humidity_max=40,
            optimal_temp_min=20,
            optimal_temp_max=25,
            advisory="Very sensitive; too damp means risk of sprouting.",
        ),
        "Barley": CropProfile(
            optimal_humidity_max=17,
            optimal_temp_min=18,
            optimal_temp_max=24,
            advisory="Malting quality suffers when it is too humid.",
        ),
        "Potatoes": CropProfile(
            optimal_humidity_max=75,
            optimal_temp_min=10,
            optimal_temp_max=18,
            advisory="Skin set matters; too hot means rot risk.",
        ),
        "Sugar beet": CropProfile(
            optimal_humidity_max=80,
            optimal_temp_min=8,
            optimal_temp_max=15,
            advisory="Harvest cool, otherwise storage losses.",
        ),
        "Sunflowers": CropProfile(
            optimal_humidity_max=15,
            optimal_temp_min=22,
            optimal_temp_max=28,
            advisory="Oil quality drops when kernel moisture is high.",
        ),
    }
)


def crop_names() -> list[str]:
    """All registered crop names, in registry order."""
    return list(CROP_PROFILES)


def get_profile(crop: str) -> CropProfile:
    """Look up a crop's profile.

    Raises:
        KeyError: If the crop is not registered.
    """
    try:
        return CROP_PROFILES[crop]
    except KeyError:
        msg = f"Unknown crop: {crop!r}"
        raise KeyError(msg) from None
