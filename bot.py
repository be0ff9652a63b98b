# bot.py
# -*- coding: utf-8 -*-
"""
Entry point: Slack weather bot.

Connects to Slack over Socket Mode (or serves the HTTP adapter on PORT when
SOCKET_MODE=false) and runs until interrupted.
"""
import asyncio
import logging

from slack_bolt.async_app import AsyncApp
from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler

from process_manager import process_manager
from scripts.weather.weather_handler import register_weather_handlers

logger = logging.getLogger("bot")


async def error_handler(error, body):
    """Last resort for errors that escape a listener."""
    logger.error("⚠️ Unhandled listener error: %r", error, exc_info=error)
    if body:
        logger.error("Event type: %s", body.get("type"))


def build_app(config) -> AsyncApp:
    # Socket Mode payloads are not signed, HTTP requests are
    app = AsyncApp(
        token=config.slack_bot_token,
        signing_secret=config.slack_signing_secret or None,
    )
    register_weather_handlers(app)
    app.error(error_handler)
    return app


async def run_socket_mode(config):
    app = build_app(config)
    handler = AsyncSocketModeHandler(app, config.slack_app_token)
    logger.info("🚀 Connecting to Slack over Socket Mode")
    await handler.start_async()


def main():
    process_manager.initialize_sync()
    config = process_manager.config

    missing = config.missing()
    if missing:
        for name in missing:
            logging.critical("❌ %s is not set", name)
        raise ValueError(f"Missing required settings: {', '.join(missing)}")

    try:
        if config.socket_mode:
            asyncio.run(run_socket_mode(config))
        else:
            logger.info("🚀 Serving Slack events over HTTP on port %s", config.port)
            # Blocking, runs aiohttp's own event loop
            build_app(config).start(port=config.port)
    except KeyboardInterrupt:
        logger.info("🛑 Stopped by user")
    finally:
        process_manager.shutdown_sync()


if __name__ == "__main__":
    main()
