"""ASGI entrypoint for the bento designer API."""

from bento_designer.api.app import create_app
from bento_designer.containers import build_container

app = create_app(build_container())
