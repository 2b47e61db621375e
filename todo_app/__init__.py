"""Todo API: a small FastAPI service with flat-file JSON persistence."""

__version__ = "1.0.0"
