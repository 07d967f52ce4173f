"""Allow ``python -m kubectl_select``."""

from kubectl_select.cli.main import app

app()
