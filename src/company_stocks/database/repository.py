import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from company_stocks.database.db_models import Company

logger = logging.getLogger(__name__)


class CompanyRepository:
    """Stores and retrieves companies. Only listing and saving are exposed."""

    def __init__(self, db: AsyncSession):
        """
        Creates a repository bound to a database session.

        Args:
            db: The database session to use for all operations.
        """
        self.db = db

    async def find_all(self) -> list[Company]:
        """
        Gets every stored company.

        Returns:
            All companies ordered by ID, or an empty list if there are none.
        """
        result = await self.db.execute(select(Company).order_by(Company.id))
        return list(result.scalars().all())

    async def save(self, company: Company) -> Company:
        """
        Inserts a new company or replaces the one with the same ID.

        A company without an ID, or with an ID that isn't stored, is inserted
        and gets a new ID from the database. A company whose ID is stored
        replaces that row's values.

        Args:
            company: The company to persist.

        Returns:
            The persisted company, including its ID.

        Raises:
            SQLAlchemyError: If the write fails. The session is rolled back.
        """
        try:
            existing = None
            if company.id is not None:
                existing = await self.db.get(Company, company.id)

            if existing is None:
                # IDs are only ever assigned by the database.
                company.id = None
                self.db.add(company)
            else:
                existing.name = company.name
                existing.stock_prices = company.stock_prices
                company = existing
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to save company {company.name!r}: {e}")
            await self.db.rollback()
            raise
        return company
