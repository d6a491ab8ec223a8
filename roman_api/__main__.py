"""Run the API with uvicorn: `python -m roman_api`."""

import uvicorn

from roman_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "roman_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
