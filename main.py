# main.py
import asyncio
import logging
from snippet_catalog.config import setup_logging
from snippet_catalog.storage import StorageContext

async def main():
    # Setup logging
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        # Select the store once and report what it serves
        async with StorageContext() as storage:
            categories = await storage.get_categories()
            components = await storage.get_components()
            logger.info(
                f"{type(storage).__name__} ready: {len(categories)} categories, "
                f"{len(components)} active components"
            )
            for category in categories:
                logger.info(f"  {category.name}: {category.component_count}")
    except Exception as e:
        logger.error(f"Error starting catalog storage: {e}", exc_info=True)
        raise

if __name__ == "__main__":
    asyncio.run(main())
