# -*- coding: utf-8 -*-
"""
Slack message payloads for the weather flow: the city prompt and the forecast.
"""

import os
import re
from datetime import datetime

from jinja2 import Environment

from core.models.weather_response import ForecastView

CITY_ACTION_ID = "pick_a_city"
CITY_PLACEHOLDER = "Enter your city here"

NOT_FOUND_TEXT = "Sorry, I can't find that city. Please try again."
ERROR_TEXT = "Sorry, an error has occured. Please try again later."
FORECAST_FALLBACK_TEXT = "Here is your weather forcast."

_LEADING_ZEROS = re.compile(r"^0+")


def clean_sun_time(value: str) -> str:
    """'06:05 AM' -> '6:05 a.m.'"""
    value = _LEADING_ZEROS.sub("", value)
    value = value.replace("AM", "a.m.")
    value = value.replace("PM", "p.m.")
    return value


def format_number(value):
    """14.0 -> '14', 14.2 -> '14.2'"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# Templates are mrkdwn, not HTML: no autoescape
TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "..", "_io", "templates")
_env = Environment(autoescape=False)
_env.filters["clean_sun"] = clean_sun_time
_env.filters["number"] = format_number


def _load_template(name: str):
    with open(os.path.join(TEMPLATES_DIR, name), "r", encoding="utf-8") as f:
        return _env.from_string(f.read())


CURRENT_TEMPLATE = _load_template("current_weather.mrkdwn.j2")
TODAY_TEMPLATE = _load_template("forecast_today.mrkdwn.j2")


def format_day(moment: datetime) -> str:
    return f"{moment:%B} {moment.day}"


def format_time(moment: datetime) -> str:
    return moment.strftime("%I:%M %p").lstrip("0")


def build_city_prompt(user_id: str) -> dict:
    """Prompt panel with a single free-text input for the city name."""
    greeting = (
        f"Hi <@{user_id}>. I can check the weather for you. "
        "Please type a city name in the input field below."
    )
    return {
        "text": greeting,
        "blocks": [{
            "dispatch_action": True,
            "type": "input",
            "element": {
                "type": "plain_text_input",
                "action_id": CITY_ACTION_ID,
                "placeholder": {
                    "type": "plain_text",
                    "text": CITY_PLACEHOLDER,
                },
            },
            "label": {
                "type": "plain_text",
                "text": greeting,
                "emoji": False,
            },
        }],
    }


def build_forecast_message(view: ForecastView) -> dict:
    header = (
        f"Here is your weather forcast for {view.city}, {view.country} "
        f"on {format_day(view.last_updated)} as of {format_time(view.last_updated)}"
    )
    return {
        "text": FORECAST_FALLBACK_TEXT,
        "blocks": [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": header},
            },
            {
                "type": "section",
                "block_id": "currentWeather",
                "text": {"type": "mrkdwn", "text": CURRENT_TEMPLATE.render(view=view)},
                "accessory": {
                    "type": "image",
                    "image_url": view.icon_url,
                    "alt_text": f"Current weather condition is {view.condition}",
                },
            },
            {"type": "divider"},
            {
                "type": "section",
                "block_id": "forecast",
                "fields": [
                    {"type": "mrkdwn", "text": TODAY_TEMPLATE.render(view=view)},
                ],
            },
        ],
    }
