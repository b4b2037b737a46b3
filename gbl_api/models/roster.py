"""Roster & leaderboard models — users and their single score row."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    url_photo = Column(String(1024), nullable=False)

    score = relationship("Score", back_populates="user", uselist=False)


class Score(Base):
    __tablename__ = "scores"
    # One score row per user; the score upsert is keyed on this constraint
    __table_args__ = (UniqueConstraint("user_id", name="uq_scores_user_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    score = Column(Float, nullable=False, default=0)

    user = relationship("User", back_populates="score")
