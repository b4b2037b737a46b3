"""
routers/ — FastAPI route modules.

Each file contains a thin APIRouter. SQL lives in services/.
Routers check required fields, call services, and map failures
to status codes.
"""
