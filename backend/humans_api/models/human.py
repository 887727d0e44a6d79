"""
Humans API — Human SQLAlchemy Model
=====================================

What:  ORM model representing the `humans` table.
Why:   Maps rows to Python objects; Base.metadata.create_all() uses it to
       bootstrap the table when it is absent.
Who:   Used by HumanStore for every query.

Table Design:
    - id: SERIAL-style integer primary key assigned by the database
    - f_name / l_name: unconstrained TEXT, duplicates allowed

    Column names are lower case on purpose. PostgreSQL folds the unquoted
    identifiers F_name / L_name to f_name / l_name, so a table created by an
    earlier deployment with `CREATE TABLE humans (id SERIAL PRIMARY KEY,
    F_name TEXT, L_name TEXT)` is picked up unchanged. The wire names
    (F_name, L_name) live in the pydantic schemas, not here.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from humans_api.database import Base


class Human(Base):
    """
    One person record.

    Lifecycle:
        1. Created by POST /humans (id assigned by the database)
        2. Names overwritten in place by PUT /humans/{id}
        3. Permanently removed by DELETE /humans/{id}
    """

    __tablename__ = "humans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str | None] = mapped_column("f_name", Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column("l_name", Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Human(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')>"
        )
