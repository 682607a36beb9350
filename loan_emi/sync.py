import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, MutableMapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoanField:
    """One logical loan value, shown as a typed field and a slider."""
    name: str
    label: str
    minimum: float
    maximum: float
    step: float
    default: float

    @property
    def field_key(self) -> str:
        return f"{self.name}_field"

    @property
    def slider_key(self) -> str:
        return f"{self.name}_slider"

    def clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)


class InputSync:
    """
    Two-way mirror between each typed field and its slider.

    Every change copies the value across and fires on_update exactly once
    with the three current values. The typed field is never clamped; only
    the slider is kept inside its bounds.
    """

    def __init__(
        self,
        state: MutableMapping,
        fields: Iterable[LoanField],
        on_update: Callable[[Dict[str, object]], None],
    ):
        self.state = state
        self.fields = {f.name: f for f in fields}
        self.on_update = on_update

    def seed(self):
        for f in self.fields.values():
            if f.field_key not in self.state:
                self.state[f.field_key] = f.default
            if f.slider_key not in self.state:
                self.state[f.slider_key] = f.clamp(f.default)
        self._recompute()

    def from_field(self, name: str):
        f = self.fields[name]
        raw = self.state.get(f.field_key)
        value = _as_number(raw)
        if value is None:
            logger.info(f"{f.label}: typed value {raw!r} not mirrored to slider")
        else:
            self.state[f.slider_key] = f.clamp(value)
        self._recompute()

    def from_slider(self, name: str):
        f = self.fields[name]
        self.state[f.field_key] = self.state[f.slider_key]
        self._recompute()

    def values(self) -> Dict[str, object]:
        return {name: self.state.get(f.field_key) for name, f in self.fields.items()}

    def _recompute(self):
        self.on_update(self.values())


def _as_number(raw):
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None
