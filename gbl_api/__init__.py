"""GBL Fishing API — login, roster and leaderboard scores over a SQL database."""
