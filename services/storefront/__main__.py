from textual.logging import TextualHandler

from shared.logging_config import setup_logging
from storefront.app import StorefrontApp
from storefront.client import CatalogClient
from storefront.config import load_config


def main() -> None:
    config = load_config()
    setup_logging(
        verbose=config.verbose,
        quiet=config.quiet,
        log_file=config.log_file,
        handler=TextualHandler(),
    )
    client = CatalogClient(config.catalog_api_url, timeout=config.timeout)
    StorefrontApp(client).run()


if __name__ == "__main__":
    main()
