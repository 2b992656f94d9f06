"""FastAPI dependency injection for shared application state."""

from crc8_calculator.core.config import Settings
from crc8_calculator.core.history import CalculationHistory


class AppState:
    """Holds shared application state instances.

    Created during app startup and accessed via FastAPI dependencies.
    """

    def __init__(self) -> None:
        self.settings: Settings | None = None
        self.history: CalculationHistory | None = None


# Global app state singleton
app_state = AppState()


def get_history() -> CalculationHistory:
    """Get the calculation history instance."""
    assert app_state.history is not None, "App not initialized"
    return app_state.history


def get_settings() -> Settings:
    """Get the settings instance."""
    assert app_state.settings is not None, "App not initialized"
    return app_state.settings
