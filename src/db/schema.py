"""Database tables / schema"""

from sqlalchemy import Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBOption(Base):
    """Named setting stored as text (same idea as the options table of a CMS)."""

    __tablename__ = "options"
    name: Mapped[str] = mapped_column(primary_key=True)
    value: Mapped[str] = mapped_column(Text)
