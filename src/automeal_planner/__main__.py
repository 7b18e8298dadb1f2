"""Run with: python -m automeal_planner"""

import uvicorn

from automeal_planner.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "automeal_planner.main:app",
        host=settings.host,
        port=settings.port,
    )
