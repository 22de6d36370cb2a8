"""Squad and match records for a football club: models, storage, CSV export, reports, queries and a terminal menu."""

__version__ = "0.1.0"