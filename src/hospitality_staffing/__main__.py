"""Allow ``python -m hospitality_staffing``."""

from .composition import app

app()
