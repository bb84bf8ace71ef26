"""Run the NoteKeeper API with uvicorn: `python -m notekeeper`."""

import uvicorn

from notekeeper.config import settings


def main() -> None:
    uvicorn.run(
        "notekeeper.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
