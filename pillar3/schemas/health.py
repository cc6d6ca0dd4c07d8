"""Pydantic schema for the ping endpoint."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    message: str
    service: str
    version: str
