"""Implementation of SettingsStore using SQLAlchemy"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import SettingsError
from src.db.schema import DBOption


class SQLSettingsStore:
    """Options stored in the 'options' table"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_option(self, name: str) -> str | None:
        """Stored value, or None if the option was never set."""
        try:
            option_db = self._fetch_option(name)
        except SQLAlchemyError as error:
            raise SettingsError(f"Could not read option {name!r}.") from error
        return option_db.value if option_db else None

    def set_option(self, name: str, value: str) -> None:
        """Create or overwrite an option."""
        try:
            option_db = self._fetch_option(name)
            if option_db is None:
                self.db.add(DBOption(name=name, value=value))
            else:
                option_db.value = value
            self.db.commit()
        except SQLAlchemyError as error:
            self.db.rollback()
            raise SettingsError(f"Could not write option {name!r}.") from error

    def _fetch_option(self, name: str) -> DBOption | None:
        query = select(DBOption).where(DBOption.name == name)
        return self.db.scalar(query)
