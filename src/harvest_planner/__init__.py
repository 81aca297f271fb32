"""Harvest Planner - harvest timing from weather forecasts.

Architecture::

    reference/     Static crop thresholds (CropProfile registry)
    analysis/      Pure evaluation core (readiness, daytime humidity,
                   optimal-day scan, hourly series, report assembly)
    datasources/   External APIs (Nominatim geocoding, Open-Meteo forecast)
    renderers/     Pure data -> HTML (status cards, charts, day info, outlook)
    flows/         Prefect orchestration (fetch loads a bundle, build renders site)
    services/      Shared utilities (HTTP session)

Data flow: datasources -> ForecastBundle -> analysis -> renderers -> site/

Extension points - see each package's docstring:
  - New crop:          reference/__init__.py
  - New data source:   datasources/__init__.py
  - New UI module:     renderers/__init__.py
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from harvest_planner.config import Settings
from harvest_planner.schemas import CropProfile, ForecastBundle, ReadinessStatus

__all__ = ["CropProfile", "ForecastBundle", "ReadinessStatus", "Settings", "__version__"]
