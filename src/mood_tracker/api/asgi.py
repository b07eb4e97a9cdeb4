"""ASGI entrypoint for the mood tracker API."""

from mood_tracker.api.app import create_app
from mood_tracker.containers import build_container

app = create_app(build_container())
