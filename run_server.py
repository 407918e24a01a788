#!/usr/bin/env python3
import uvicorn

from carddesk.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "carddesk.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
