"""Allow running as ``python -m release_tagger``."""

from release_tagger.cli.app import app

app()
