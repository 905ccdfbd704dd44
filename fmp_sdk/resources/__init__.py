"""Endpoint façades, one per API area. All share a single FMPClient."""

from fmp_sdk.resources.analyst import AnalystResource
from fmp_sdk.resources.base import BaseResource
from fmp_sdk.resources.bulk import BulkResource
from fmp_sdk.resources.commodities import CommoditiesResource
from fmp_sdk.resources.company import CompanyResource
from fmp_sdk.resources.cot import COTResource
from fmp_sdk.resources.economics import EconomicsResource
from fmp_sdk.resources.esg import ESGResource
from fmp_sdk.resources.etf import ETFResource
from fmp_sdk.resources.events import EventsResource
from fmp_sdk.resources.financials import FinancialsResource
from fmp_sdk.resources.fundraisers import FundraisersResource
from fmp_sdk.resources.indexes import IndexesResource
from fmp_sdk.resources.insider import InsiderResource
from fmp_sdk.resources.market import MarketResource
from fmp_sdk.resources.news import NewsResource
from fmp_sdk.resources.performance import PerformanceResource
from fmp_sdk.resources.search import SearchResource
from fmp_sdk.resources.sec import SECResource
from fmp_sdk.resources.technical import TechnicalResource
from fmp_sdk.resources.valuation import ValuationResource

__all__ = [
    "AnalystResource",
    "BaseResource",
    "BulkResource",
    "COTResource",
    "CommoditiesResource",
    "CompanyResource",
    "ESGResource",
    "ETFResource",
    "EconomicsResource",
    "EventsResource",
    "FinancialsResource",
    "FundraisersResource",
    "IndexesResource",
    "InsiderResource",
    "MarketResource",
    "NewsResource",
    "PerformanceResource",
    "SECResource",
    "SearchResource",
    "TechnicalResource",
    "ValuationResource",
]
