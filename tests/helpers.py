from datetime import datetime, timezone

from taskboard.auth import create_access_token

ALICE = "5d0c8a7e-1f4b-4c1e-9a53-2b6f0c3d9e11"
BOB = "9b2f4e61-7c3a-4d8e-b0f5-6a1c2d3e4f50"
ORG_A = "0f8e2c4a-6b1d-4e3f-8a9b-7c5d3e1f2a40"
ORG_B = "3a7c9e1b-5d2f-4a6c-8e0b-1d3f5a7c9e20"
MISSING_ID = "00000000-0000-4000-8000-000000000000"


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def at(day: int, hour: int = 12) -> datetime:
    """A fixed UTC timestamp in March 2020."""
    return datetime(2020, 3, day, hour, 0, 0, tzinfo=timezone.utc)
