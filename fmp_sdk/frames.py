"""Convert API payloads to pandas DataFrames."""

from __future__ import annotations

from typing import Any

import pandas as pd


def to_frame(records: Any, index: str | None = "date") -> pd.DataFrame:
    """Build a DataFrame from a decoded API response.

    Accepts a list of records, a single record, or the
    ``{"symbol": ..., "historical": [...]}`` envelope used by the full price
    history endpoints. When ``index`` names a column present in the data it is
    parsed to datetimes and becomes the (ascending) index; otherwise the frame
    keeps a RangeIndex.

    Example::

        df = to_frame(fmp.market.get_historical_prices("AAPL"))
        df["close"].pct_change()
    """
    if not records:
        return pd.DataFrame()
    if isinstance(records, dict):
        records = records.get("historical", [records])
        if not records:
            return pd.DataFrame()

    df = pd.DataFrame.from_records(records)
    if index and index in df.columns:
        df[index] = pd.to_datetime(df[index])
        df = df.set_index(index).sort_index()
    return df
