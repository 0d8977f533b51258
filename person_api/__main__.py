"""Run the Person API with uvicorn: ``python -m person_api``."""

import uvicorn

from person_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "person_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
