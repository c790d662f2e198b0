"""Body-part health and vitals."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class HealthValue:
    current: float
    maximum: float

    def __post_init__(self) -> None:
        if self.maximum < 0:
            raise ValueError("maximum health cannot be negative")

    def set_current(self, value: float) -> None:
        """Set ``current``, clamped into ``[0, maximum]``."""

        self.current = min(max(value, 0.0), self.maximum)

    def set_fraction_of_maximum(self, fraction: float) -> None:
        self.set_current(self.maximum * fraction)

    def restore(self) -> None:
        self.current = self.maximum


@dataclass(kw_only=True)
class Health:
    body_parts: dict[str, HealthValue] = field(default_factory=dict[str, HealthValue])
    hydration: HealthValue | None = None
    energy: HealthValue | None = None

    def vitals(self) -> list[HealthValue]:
        values = list(self.body_parts.values())
        values.extend(value for value in (self.hydration, self.energy) if value is not None)
        return values

    def apply_snapshot(self, snapshot: Health) -> None:
        """Copy current values from ``snapshot`` while keeping our own maxima."""

        for name, reported in snapshot.body_parts.items():
            existing = self.body_parts.get(name)
            if existing is None:
                existing = HealthValue(current=reported.maximum, maximum=reported.maximum)
                self.body_parts[name] = existing
            existing.set_current(reported.current)

        if snapshot.hydration is not None:
            if self.hydration is None:
                self.hydration = HealthValue(snapshot.hydration.maximum, snapshot.hydration.maximum)
            self.hydration.set_current(snapshot.hydration.current)
        if snapshot.energy is not None:
            if self.energy is None:
                self.energy = HealthValue(snapshot.energy.maximum, snapshot.energy.maximum)
            self.energy.set_current(snapshot.energy.current)

    def scale_body_parts(self, fraction: float) -> None:
        for part in self.body_parts.values():
            part.set_fraction_of_maximum(fraction)

    def restore_all(self) -> None:
        for value in self.vitals():
            value.restore()

    def is_within_bounds(self) -> bool:
        return all(0 <= value.current <= value.maximum for value in self.vitals())
