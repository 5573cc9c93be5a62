"""Protocol for the settings store (SQLAlchemy implementation in sql_repository.py, tests use a dictionary)"""

from typing import Protocol


class SettingsStore(Protocol):
    """Key/value access to stored settings"""

    def get_option(self, name: str) -> str | None:
        """Stored value, or None if the option was never set."""
        ...

    def set_option(self, name: str, value: str) -> None:
        """Create or overwrite an option."""
        ...
