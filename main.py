import logging

from chat_proxy.core.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main():
    import uvicorn

    uvicorn.run(
        app="chat_proxy.main:app",
        host=settings.host,
        port=settings.port,
        loop="uvloop",
    )

if __name__ == "__main__":
    main()
