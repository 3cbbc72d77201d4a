"""Run the API: python -m city_explorer (or the city-explorer script)."""
import logging

import uvicorn

from city_explorer.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("city_explorer.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
