"""ASGI entrypoint for the food API."""

from cn_food.api.app import create_app
from cn_food.containers import build_container

app = create_app(build_container())
