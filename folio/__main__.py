"""
Serve the API:

  python -m folio

Listens on HOST:PORT from settings (PORT defaults to 7860).
"""

import uvicorn

from folio.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "folio.main:app",
        host=settings.HOST,
        port=settings.PORT,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
