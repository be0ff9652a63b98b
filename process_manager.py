# process_manager.py
# -*- coding: utf-8 -*-
"""
Global dependency holder.
Initializes every service once and gives the handlers access to them.
"""

import logging
from typing import Optional

from config.bot_config import BotConfig
from config.logging_config import setup_logging
from core.utils.api_client import WeatherAPIClient

logger = logging.getLogger("process_manager")


class ProcessManager:
    """
    Single application context. All dependencies are created here.
    """

    def __init__(self):
        self._initialized = False
        self.config: Optional[BotConfig] = None
        self.weather_client: Optional[WeatherAPIClient] = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize_sync(self, config: Optional[BotConfig] = None):
        """Loads configuration, sets up logging and builds the weather client."""
        if self._initialized:
            return

        # 1. Configuration
        self.config = config or BotConfig.load()

        # 2. Logging
        setup_logging(self.config.log_level, self.config.logs_dir)

        # 3. Weather provider client
        self.weather_client = WeatherAPIClient(
            api_key=self.config.rapidapi_key,
            api_host=self.config.rapidapi_host,
        )

        self._initialized = True
        logger.info("✅ ProcessManager: initialized (provider host %s)", self.config.rapidapi_host)

    def shutdown_sync(self):
        """Releases services. Safe to call more than once."""
        if not self._initialized:
            return

        # The weather client opens a fresh HTTP session per lookup, nothing to close
        self.weather_client = None
        self._initialized = False
        logger.info("🛑 ProcessManager: shut down")


# Global instance, the access point for every module
process_manager = ProcessManager()
