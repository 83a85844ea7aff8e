"""
Runtime configuration read from the environment.

All settings are plain module constants evaluated once at import time.
The credential pair is handed to the Authenticator when the workspace is
built, so tests can inject their own pair without touching the environment.
"""

import os

# Fixed operator credential pair
ROSTER_USERNAME = os.getenv("ROSTER_USERNAME", "admin")
ROSTER_PASSWORD = os.getenv("ROSTER_PASSWORD", "admin123")

# In-memory SQLite by default: records live only as long as the process
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
