"""
Simple Dependency Container

Basic dependency management without external libraries.
"""

from typing import Dict, Any, Optional

from app.core.config import get_settings
from app.core.database import DatabaseManager, db_manager
from app.utils.logger import get_logger

logger = get_logger(__name__)


class SimpleContainer:
    """Simple dependency injection container."""

    def __init__(self):
        self._instances: Dict[str, Any] = {}
        self._initialized = False

    async def initialize(self, database: Optional[DatabaseManager] = None):
        """Initialize container and dependencies."""
        if self._initialized:
            return

        logger.info("Initializing application container...")

        settings = get_settings()
        self._instances['settings'] = settings

        # Initialize database manager
        database = database or db_manager
        await database.init_database()
        self._instances['db_manager'] = database

        # Seed the job catalog when configured
        if settings.JOBS_SEED_FILE:
            # Imported here to keep the container free of service imports at module load
            from app.repositories.job_repository import JobRepository
            from app.services.job_service import JobService

            counts = await JobService(JobRepository(database)).import_catalog_file(
                settings.JOBS_SEED_FILE
            )
            logger.info("Job catalog seeded", file=settings.JOBS_SEED_FILE, **counts)

        self._initialized = True
        logger.info("Container initialized successfully")

    async def shutdown(self):
        """Shutdown container and cleanup resources."""
        logger.info("Shutting down container...")

        # Cleanup database connections
        if 'db_manager' in self._instances:
            await self._instances['db_manager'].close_connections()

        self._instances.clear()
        self._initialized = False
        logger.info("Container shutdown complete")

    def get(self, name: str) -> Any:
        """Get dependency by name."""
        return self._instances.get(name)


# Global container instance
container = SimpleContainer()


async def init_container():
    """Initialize the global container."""
    await container.initialize()


async def shutdown_container():
    """Shutdown the global container."""
    await container.shutdown()


def get_container() -> SimpleContainer:
    """Get the global container instance."""
    return container
