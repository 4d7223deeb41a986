import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from company_stocks.common.models import CompanyRequest, CompanyResponse
from company_stocks.database.connection import get_db
from company_stocks.database.db_models import Company
from company_stocks.database.repository import CompanyRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/companies", tags=["companies"])


@router.get("", response_model=list[CompanyResponse])
async def get_all_companies(db: AsyncSession = Depends(get_db)):
    """Returns every stored company."""
    return await CompanyRepository(db).find_all()


@router.post("", response_model=CompanyResponse)
async def create_company(
    company_request: CompanyRequest, db: AsyncSession = Depends(get_db)
):
    """Persists the submitted company and returns it with its assigned ID."""
    company = Company(
        id=company_request.id,
        name=company_request.name,
        stock_prices=list(company_request.stock_prices),
    )
    saved = await CompanyRepository(db).save(company)
    logger.info(
        f"Saved company {saved.id} ({saved.name}) with "
        f"{len(saved.stock_prices)} prices"
    )
    return saved
