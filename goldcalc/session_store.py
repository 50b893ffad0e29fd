"""Session snapshot store for GoldCalc.

This module keeps the last inputs and results of each calculator for the
lifetime of one session, plus user preferences that outlive calculator
resets. A store is created by the caller and handed to the engine; there
is no process-wide instance.
"""
import json
import logging
from typing import Any, Dict, Optional

from goldcalc.config import CALCULATOR_KEYS, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


class CalculatorSessionStore:
    """Holds one snapshot per calculator and a set of user preferences.

    Snapshots are stored as JSON text, so every read returns a fresh copy
    and callers cannot mutate stored state through a returned reference.

    Attributes:
        calculator_keys: Keys accepted for calculator snapshots.
    """

    def __init__(self, calculator_keys=CALCULATOR_KEYS):
        """Initialize CalculatorSessionStore.

        Args:
            calculator_keys: Keys accepted for calculator snapshots.
        """
        self.calculator_keys = tuple(calculator_keys)
        self._snapshots: Dict[str, str] = {}
        self._preferences: Dict[str, str] = {}

    def _check_key(self, key: str) -> None:
        if key not in self.calculator_keys:
            raise KeyError(f"Unknown calculator key '{key}'")

    def get_calculator_data(self, key: str) -> Optional[Dict[str, Any]]:
        """Get the snapshot for a calculator, or None if nothing is stored."""
        self._check_key(key)
        data = self._snapshots.get(key)
        return json.loads(data) if data is not None else None

    def set_calculator_data(self, key: str, data: Dict[str, Any]) -> None:
        """Replace the snapshot for a calculator.

        Values JSON cannot encode (dates) are stored as their str() form.

        Raises:
            KeyError: If the key is not a calculator key.
        """
        self._check_key(key)
        self._snapshots[key] = json.dumps(data, default=str)
        logger.debug("Saved calculator data for %s", key)

    def remove_calculator_data(self, key: str) -> None:
        """Drop the snapshot for one calculator."""
        self._check_key(key)
        self._snapshots.pop(key, None)
        logger.debug("Cleared calculator data for %s", key)

    def has_calculator_data(self, key: str) -> bool:
        self._check_key(key)
        return key in self._snapshots

    def clear_calculator_data(self) -> None:
        """Drop every calculator snapshot but keep user preferences."""
        self._snapshots.clear()
        logger.debug("Cleared all calculator data")

    def get_user_preference(self, key: str, default: Any = None) -> Any:
        data = self._preferences.get(key)
        return json.loads(data) if data is not None else default

    def set_user_preference(self, key: str, value: Any) -> None:
        self._preferences[key] = json.dumps(value)
        logger.debug("Saved user preference %s", key)

    @property
    def language(self) -> str:
        """Preferred display language code."""
        return self.get_user_preference('language', DEFAULT_LANGUAGE)

    @language.setter
    def language(self, value: str) -> None:
        self.set_user_preference('language', value)

    def clear_all(self) -> None:
        """Drop snapshots and preferences."""
        self._snapshots.clear()
        self._preferences.clear()
