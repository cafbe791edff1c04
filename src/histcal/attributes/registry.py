from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Sequence

from ..core.engine import ConversionProtocol
from ..core.errors import InvalidDateError
from ..core.types import HistoricDate, HistoricEra

FieldGetter = Callable[[HistoricDate], Any]
FieldSetter = Callable[[HistoricDate, Any], HistoricDate]


@dataclass(frozen=True)
class HistoricField:
    """A queryable/settable field of the historic date a linear day shows in a history."""
    name: str
    getter: FieldGetter
    setter: FieldSetter

    def get(self, history: ConversionProtocol, mjd: int) -> Any:
        return self.getter(history.from_linear_day(mjd))

    def with_value(self, history: ConversionProtocol, mjd: int, value: Any) -> int:
        """
        Linear day of the date with this field replaced. The day of month is
        clamped to the month length; a result inside a cutover gap raises.
        """
        d = self.setter(history.from_linear_day(mjd), value)
        return history.to_linear_day(history.adjust_day_of_month(d))


_REGISTRY: Dict[str, HistoricField] = {}

def register_field(f: HistoricField) -> None:
    _REGISTRY[f.name] = f

def get_field(name: str) -> HistoricField:
    if name not in _REGISTRY:
        raise KeyError(f"Unknown field '{name}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[name]

def compute_fields(history: ConversionProtocol, mjd: int, names: Sequence[str]) -> Dict[str, Any]:
    d = history.from_linear_day(mjd)
    return {name: get_field(name).getter(d) for name in names}

def with_field(history: ConversionProtocol, mjd: int, name: str, value: Any) -> int:
    return get_field(name).with_value(history, mjd, value)


def _set_era(d: HistoricDate, value: Any) -> HistoricDate:
    if not isinstance(value, HistoricEra):
        try:
            value = HistoricEra(str(value).upper())
        except ValueError:
            raise InvalidDateError(f"Unknown era: {value!r}") from None
    return replace(d, era=value)

# replace() re-runs HistoricDate validation, so out-of-range values raise InvalidDateError
register_field(HistoricField("era", lambda d: d.era, _set_era))
register_field(HistoricField("year-of-era", lambda d: d.year_of_era, lambda d, v: replace(d, year_of_era=int(v))))
register_field(HistoricField("month", lambda d: d.month, lambda d, v: replace(d, month=int(v))))
register_field(HistoricField("day-of-month", lambda d: d.day_of_month, lambda d, v: replace(d, day_of_month=int(v))))
