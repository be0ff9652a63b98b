# scripts/weather/weather_handler.py
"""
Slack listeners for the weather flow.

Any message -> city prompt. Submitting the prompt -> forecast, apology or
generic error.
"""
import logging

from process_manager import process_manager
from core.utils.error_handler import log_exception
from scripts.weather._processes.data_fetcher import fetch_weather
from scripts.weather._processes.formatter import (
    CITY_ACTION_ID,
    ERROR_TEXT,
    NOT_FOUND_TEXT,
    build_city_prompt,
    build_forecast_message,
)

logger = logging.getLogger("weather_handler")


async def prompt_for_city(message, say):
    """Answers every message with the city input panel."""
    user_id = message.get("user")
    await say(**build_city_prompt(user_id))
    logger.debug("City prompt sent to %s", user_id)


async def handle_city_submission(body, ack, say):
    """Handles the value submitted from the city input."""
    # Slack gives interactions 3 seconds to be acknowledged
    await ack()

    user_id = body.get("user", {}).get("id")
    city = None

    try:
        city = body["actions"][0].get("value") or ""
        view = await fetch_weather(process_manager.weather_client, city)

        if view is None:
            await say(text=NOT_FOUND_TEXT)
            return

        await say(**build_forecast_message(view))
    except Exception as e:
        log_exception(e, "Weather lookup failed", context={"user_id": user_id, "city": city})
        await say(text=ERROR_TEXT)


def register_weather_handlers(app):
    """Attaches the weather listeners to a Bolt app."""
    # Empty pattern: every message
    app.message("")(prompt_for_city)
    app.action(CITY_ACTION_ID)(handle_city_submission)
