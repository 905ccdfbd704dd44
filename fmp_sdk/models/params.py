"""Typed request parameters shared by the resource façades."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Period(StrEnum):
    ANNUAL = "annual"
    QUARTER = "quarter"


class IntradayInterval(StrEnum):
    ONE_MIN = "1min"
    FIVE_MIN = "5min"
    FIFTEEN_MIN = "15min"
    THIRTY_MIN = "30min"
    ONE_HOUR = "1hour"
    FOUR_HOUR = "4hour"


class TechnicalTimeframe(StrEnum):
    ONE_MIN = "1min"
    FIVE_MIN = "5min"
    FIFTEEN_MIN = "15min"
    THIRTY_MIN = "30min"
    ONE_HOUR = "1hour"
    FOUR_HOUR = "4hour"
    DAILY = "1day"


class EconomicIndicator(StrEnum):
    GDP = "GDP"
    REAL_GDP = "realGDP"
    NOMINAL_POTENTIAL_GDP = "nominalPotentialGDP"
    REAL_GDP_PER_CAPITA = "realGDPPerCapita"
    FEDERAL_FUNDS = "federalFunds"
    CPI = "CPI"
    INFLATION_RATE = "inflationRate"
    INFLATION = "inflation"
    RETAIL_SALES = "retailSales"
    CONSUMER_SENTIMENT = "consumerSentiment"
    DURABLE_GOODS = "durableGoods"
    UNEMPLOYMENT_RATE = "unemploymentRate"
    TOTAL_NONFARM_PAYROLL = "totalNonfarmPayroll"
    INITIAL_CLAIMS = "initialClaims"
    INDUSTRIAL_PRODUCTION = "industrialProductionTotalIndex"
    HOUSING_STARTS = "newPrivatelyOwnedHousingUnitsStartedTotalUnits"
    TOTAL_VEHICLE_SALES = "totalVehicleSales"
    RETAIL_MONEY_FUNDS = "retailMoneyFunds"
    RECESSION_PROBABILITIES = "smoothedUSRecessionProbabilities"
    BUSINESS_INVENTORIES = "businessInventories"
    HOUSING_INVENTORY = "housingInventory"
    NONRESIDENTIAL_INVESTMENT = "nonresidentialInvestment"
    FEDERAL_SURPLUS_DEFICIT = "federalSurplusDeficit"


class ScreenerParams(BaseModel):
    """Filters for the stock screener. Field aliases are the wire names."""

    model_config = ConfigDict(populate_by_name=True)

    market_cap_more_than: int | float | None = Field(None, alias="marketCapMoreThan")
    market_cap_lower_than: int | float | None = Field(None, alias="marketCapLowerThan")
    price_more_than: int | float | None = Field(None, alias="priceMoreThan")
    price_lower_than: int | float | None = Field(None, alias="priceLowerThan")
    beta_more_than: int | float | None = Field(None, alias="betaMoreThan")
    beta_lower_than: int | float | None = Field(None, alias="betaLowerThan")
    volume_more_than: int | float | None = Field(None, alias="volumeMoreThan")
    volume_lower_than: int | float | None = Field(None, alias="volumeLowerThan")
    dividend_more_than: int | float | None = Field(None, alias="dividendMoreThan")
    dividend_lower_than: int | float | None = Field(None, alias="dividendLowerThan")
    is_etf: bool | None = Field(None, alias="isEtf")
    is_actively_trading: bool | None = Field(None, alias="isActivelyTrading")
    sector: str | None = None
    industry: str | None = None
    country: str | None = None
    exchange: str | None = None
    limit: int | None = None
