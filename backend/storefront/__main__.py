"""Run the API with uvicorn: `python -m storefront` (PORT defaults to 3000)."""

import uvicorn

from storefront.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
