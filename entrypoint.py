"""Service entrypoint: starts uvicorn with host/port from settings."""
import uvicorn

from portfolio_service.config.settings import get_settings
from portfolio_service.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
