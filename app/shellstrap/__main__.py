"""Allow running shellstrap with ``python -m shellstrap``."""

from shellstrap.cli.main import app

app()
