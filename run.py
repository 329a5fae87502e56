import asyncio
import logging

import uvicorn

from tea_store import config

logging.basicConfig(level=config.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


async def main():
    server_config = uvicorn.Config(
        "tea_store.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL,
    )
    server = uvicorn.Server(server_config)

    logger.info("Server is running on port %s...", config.PORT)
    await server.serve()


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
