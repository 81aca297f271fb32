"""External data source integrations (the forecast access port).

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Loads are sequential: ``geocoding`` resolves a place name to coordinates,
then ``weather`` fetches the forecast for those coordinates. The evaluation
core only ever sees the finished ``ForecastBundle``.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.

2. Write fetch functions that return dicts or models::

       from harvest_planner.services.http import session

       def fetch_something(lat, lon) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/fetch.py``) with a ``@task``.

5. Add tests in ``tests/test_{name}.py``.
"""
