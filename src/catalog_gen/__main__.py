"""Entry point for the model catalog generator."""

import logging
import sys

from catalog_gen import __version__
from catalog_gen.catalog import aggregate, load_catalogs
from catalog_gen.config import CatalogGenConfig, LogLevel
from catalog_gen.reporting.renderer import write_catalog
from catalog_gen.utils.errors import CatalogGenError

logger = logging.getLogger(__name__)


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the generator."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def run(config: CatalogGenConfig) -> int:
    """Load, sort and render all catalogs.

    Returns:
        Number of models written.
    """
    catalogs = load_catalogs(config.catalogs_dir, config.catalog_pattern)
    models = aggregate(catalogs)
    logger.debug(f"Aggregated {len(models)} models from {len(catalogs)} catalogs")
    return write_catalog(models, config.output_file)


def main() -> int:
    """Main entry point."""
    config = CatalogGenConfig()
    setup_logging(config.log_level)
    logger.info(f"Starting catalog-gen v{__version__}")

    try:
        count = run(config)
    except CatalogGenError as e:
        logger.error(e.message)
        return 1

    print(f"Generated {config.output_file.name} with {count} models")
    return 0


if __name__ == "__main__":
    sys.exit(main())
