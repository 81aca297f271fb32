"""
Prefect flows for the harvest report pipeline.

Flows:
- fetch: Geocode a place name, then download its Open-Meteo forecast
- build: Evaluate the selected crops and render the static report page

Usage (local):
    python -m harvest_planner.flows.fetch
    python -m harvest_planner.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-report/default'
"""
