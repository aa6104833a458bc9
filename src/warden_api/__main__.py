"""Run the Warden API with uvicorn: ``python -m warden_api``."""

import uvicorn

from warden_config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "warden_api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
