"""histcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_histories,
    get_history,
    register_history,
    to_linear_day,
    from_linear_day,
    is_valid,
    year_length,
    adjust_day_of_month,
    to_date,
    from_date,
)
from .core.errors import (
    HistcalError,
    InvalidConstructionError,
    InvalidDateError,
    PersistedFormError,
)
from .core.types import HistoricDate, HistoricEra, HistoryVariant
from .engines.algorithms import CalendarAlgorithm
from .engines.cutover import CutOverEvent
from .engines.history import History
from .engines.factory import (
    PROLEPTIC_GREGORIAN,
    PROLEPTIC_JULIAN,
    of_first_gregorian_reform,
    of_gregorian_reform,
    of_locale,
    of_sweden,
)
from .engines.spx import encode_history, decode_history

__all__ = [
    "list_histories",
    "get_history",
    "register_history",
    "to_linear_day",
    "from_linear_day",
    "is_valid",
    "year_length",
    "adjust_day_of_month",
    "to_date",
    "from_date",
    "HistcalError",
    "InvalidConstructionError",
    "InvalidDateError",
    "PersistedFormError",
    "HistoricDate",
    "HistoricEra",
    "HistoryVariant",
    "CalendarAlgorithm",
    "CutOverEvent",
    "History",
    "PROLEPTIC_GREGORIAN",
    "PROLEPTIC_JULIAN",
    "of_first_gregorian_reform",
    "of_gregorian_reform",
    "of_locale",
    "of_sweden",
    "encode_history",
    "decode_history",
]
