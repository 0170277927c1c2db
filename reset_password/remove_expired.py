"""Remove expired password reset requests. Run from cron or a scheduler."""

import argparse
import asyncio
import logging

from reset_password.app.errors import StorageError
from reset_password.app.use_cases.reset import RemoveExpiredRequestsUseCase
from reset_password.config import ApplicationConfig
from reset_password.depends import create_engine, create_session_factory, get_reset_request_store

logger = logging.getLogger(__name__)


async def run(db_uri: str = None) -> int:
    """
    Remove expired requests from the database at `db_uri`.

    The schema is not created here: a missing table raises StorageError
    instead of silently reporting zero removals.
    """
    engine = create_engine(db_uri)
    try:
        async with get_reset_request_store(create_session_factory(engine)) as store:
            result = await RemoveExpiredRequestsUseCase(store).execute()
    finally:
        await engine.dispose()
    return result.value.removed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Remove expired password reset requests")
    parser.add_argument(
        "--db-uri",
        default=ApplicationConfig.DB_URI,
        help="Database URI (default from the YAML config DB_URI)",
    )
    parser.add_argument(
        "--log-level",
        default=ApplicationConfig.LOG_LEVEL,
        help="Logging level (default from the YAML config LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        removed = asyncio.run(run(args.db_uri))
    except StorageError as exc:
        logger.error(f"Cleanup failed: {exc.base_error.message}")
        raise SystemExit(1) from exc

    print(f"Removed {removed} expired reset password request(s).")


if __name__ == "__main__":
    main()
