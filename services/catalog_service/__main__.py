import uvicorn

from catalog_service import config
from shared.logging_config import setup_logging


def main() -> None:
    setup_logging(verbose=config.VERBOSE, quiet=config.QUIET, log_file=config.LOG_FILE)
    uvicorn.run("catalog_service.main:app", host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
