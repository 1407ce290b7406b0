from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, Text, func
from sqlalchemy.orm import DeclarativeMeta, declarative_base

Base: DeclarativeMeta = declarative_base()


class User(Base):
    __tablename__ = "users"

    # Integer primary key renders as SERIAL on PostgreSQL
    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"<User id={self.id} name={self.name} email={self.email}>"
