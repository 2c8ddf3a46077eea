"""Web Server Gateway Interface entry-point."""

from rentcar.app import create_app

app = create_app()
