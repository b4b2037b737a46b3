"""
services/ — SQL and row shaping for each resource.

Services take the Database handle as their first argument and let
SQLAlchemyError propagate; routers decide the HTTP status.
"""
