from sqlalchemy import Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class ExchangeRateDB(Base):
	__tablename__ = 'exchange_rates'

	from_currency: Mapped[str] = mapped_column(String(10), primary_key=True)
	to_currency: Mapped[str] = mapped_column(String(10), primary_key=True, index=True)
	rate: Mapped[float] = mapped_column(
		Numeric(precision=18, scale=6, asdecimal=False), nullable=False
	)
