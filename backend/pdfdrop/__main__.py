"""Run the service: `python -m pdfdrop`."""
import logging

import uvicorn

from pdfdrop.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "pdfdrop.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.API_PORT,
    )


if __name__ == "__main__":
    main()
