"""Run the service with uvicorn: `python -m quote_consumer`."""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "quote_consumer:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").lower(),
    )


if __name__ == "__main__":
    main()
