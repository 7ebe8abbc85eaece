import uvicorn

from .config import HOST, LOG_LEVEL, PORT


def main():
    uvicorn.run("f1api.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
