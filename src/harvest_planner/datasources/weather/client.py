"""Open-Meteo API client constants and shared configuration.

API docs:
  - Forecast: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# 9 days: today, tomorrow and the 7-day outlook after that
DEFAULT_FORECAST_DAYS = 9

# Daily variables we request from Open-Meteo
DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "precipitation_probability_max",
    "relative_humidity_2m_max",
]

# Hourly variables we request from Open-Meteo
HOURLY_VARS = [
    "temperature_2m",
    "precipitation_probability",
    "relative_humidity_2m",
]
