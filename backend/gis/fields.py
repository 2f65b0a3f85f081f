"""
Field Parsers
Scalar parsers for raw text fields, composable into a priority chain.

A parser takes a string (or None) and returns a typed value,
or returns its input unchanged when it does not recognize it.
Parsers never raise.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Callable, Iterable, Mapping, Optional, Union

import pandas as pd

from . import location as Location

logger = logging.getLogger(__name__)

Parser = Callable[[Any], Any]

DEFAULT_NULLS = ("", "nil", "null", "nan", "inf")
DEFAULT_TRUES = ("true", "t")
DEFAULT_FALSES = ("false", "f")


def p_null(nulls: Iterable[str] = DEFAULT_NULLS) -> Parser:
    """Parser for null values, matched case-insensitively"""
    words = {w.lower() for w in nulls}

    def parse(value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, str) and value.strip().lower() in words:
            return None
        return value

    return parse


def p_bool(trues: Iterable[str] = DEFAULT_TRUES, falses: Iterable[str] = DEFAULT_FALSES) -> Parser:
    """Parser for booleans, matched case-insensitively"""
    true_words = {w.lower() for w in trues}
    false_words = {w.lower() for w in falses}

    def parse(value: Any) -> Any:
        if not isinstance(value, str):
            return value
        word = value.strip().lower()
        if word in true_words:
            return True
        if word in false_words:
            return False
        return value

    return parse


def p_int(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    try:
        return int(value.strip())
    except ValueError:
        return value


def p_float(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip()
    # nan and inf are left to the null parser
    if not any(c.isdigit() for c in text):
        return value
    try:
        return float(text)
    except ValueError:
        return value


def p_date(value: Any) -> Any:
    """Parser for ISO 8601 dates, times and datetimes"""
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text or not text[0].isdigit():
        return value
    for kind in (date, datetime, time):
        try:
            return kind.fromisoformat(text)
        except ValueError:
            continue
    return value


def p_location(value: Any) -> Any:
    """Parser for geo-locations in any of the supported string notations"""
    return Location.parse(value) if isinstance(value, str) else value


def compose(parsers: Iterable[Parser]) -> Parser:
    """
    Chain parsers in priority order.

    The first parser that changes its input wins; a None result counts
    as recognized, so a null parser stops the chain.
    """
    chain = list(parsers)

    def parse(value: Any) -> Any:
        for parser in chain:
            result = parser(value)
            if result is None or result is not value:
                return result
        return value

    return parse


def p_guess(
    nulls: Iterable[str] = DEFAULT_NULLS,
    trues: Iterable[str] = DEFAULT_TRUES,
    falses: Iterable[str] = DEFAULT_FALSES,
) -> Parser:
    """Guess the type of a field: null, bool, int, float, date/time, location."""
    return compose([p_null(nulls), p_bool(trues, falses), p_int, p_float, p_date, p_location])


def read_csv(
    path: str,
    parsers: Optional[Mapping[Union[int, str], Parser]] = None,
    default: Optional[Parser] = None,
    header: Optional[int] = None,
) -> pd.DataFrame:
    """
    Read a CSV file and parse its fields.

    Every cell is read as raw text. A column parser is looked up by column
    label (the column index when there is no header), otherwise the default
    parser is used. Columns without a parser keep their raw text.

    Args:
        path: CSV file path
        parsers: Column label -> parser
        default: Parser for columns without their own
        header: Header row index, or None for no header

    Returns:
        pd.DataFrame: parsed fields, object columns where types are mixed
    """
    df = pd.read_csv(path, header=header, dtype=str, keep_default_na=False, skipinitialspace=True)
    parsers = dict(parsers or {})
    unknown = set(parsers) - set(df.columns)
    if unknown:
        raise ValueError(f"Parsers given for unknown columns: {sorted(map(str, unknown))}")

    for column in df.columns:
        parser = parsers.get(column, default)
        if parser is not None:
            df[column] = pd.Series([parser(v) for v in df[column]], index=df.index, dtype=object)

    logger.info(f"Read {len(df)} rows x {len(df.columns)} columns from {path}")
    return df
