import uvicorn

from .core import getSettings


def main():
    settings = getSettings()
    uvicorn.run(
        "pystock.pystock:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
