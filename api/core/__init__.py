"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks every resource uses (DB pool, settings,
error types). Resource SQL lives in the resource's own package
(e.g. `instituicoes/repository.py`).
"""
