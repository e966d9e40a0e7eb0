"""ASGI entrypoint for the MealChoice API."""

from meal_choice.api.app import create_app
from meal_choice.containers import build_container

app = create_app(build_container())
