"""
schemas/ — Pydantic request/response models for the GBL API

Request models accept missing fields so routers can answer with the
API's own 400 messages; response models document the JSON shapes.
"""
