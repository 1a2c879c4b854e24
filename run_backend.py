#!/usr/bin/env python
"""Script to run the taskboard API server."""
import os
from pathlib import Path

import uvicorn

# Run from the repo root so the default SQLite path lands here
os.chdir(Path(__file__).resolve().parent)

if __name__ == "__main__":
    uvicorn.run(
        "taskboard.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
