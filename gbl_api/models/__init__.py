"""Database models.

Import from here:  from gbl_api.models import Base, User, Score, UserLogin
"""

from .base import Base  # noqa: F401

# Login credentials
from .auth import UserLogin  # noqa: F401

# Roster & leaderboard
from .roster import Score, User  # noqa: F401
