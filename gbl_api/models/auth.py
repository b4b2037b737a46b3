"""Login credential records.

Passwords are stored and compared as plain text; the table is not linked
to the users roster.
"""

from sqlalchemy import Column, Integer, String

from .base import Base


class UserLogin(Base):
    __tablename__ = "user_login"
    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
