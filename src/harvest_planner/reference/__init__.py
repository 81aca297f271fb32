"""Static agronomic reference data.

Reference data that doesn't change with API calls: per-crop harvest
thresholds and advisories.

Adding a new crop:
1. Add a ``CropProfile`` entry to ``CROP_PROFILES`` in ``reference/crops.py``
2. Nothing else - selection, assessment and rendering pick it up by name
"""

from harvest_planner.reference.crops import CROP_PROFILES as CROP_PROFILES
from harvest_planner.reference.crops import crop_names as crop_names
from harvest_planner.reference.crops import get_profile as get_profile
