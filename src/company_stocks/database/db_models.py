from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Company(Base):
    __tablename__ = "company"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Prices are owned by the company row and stored inline, in order.
    stock_prices: Mapped[list[float]] = mapped_column(JSON, default=list)

    def __repr__(self) -> str:
        return f"Company(id={self.id!r}, name={self.name!r})"
