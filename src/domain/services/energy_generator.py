"""
Domain service producing synthetic solar energy readings.

Values follow a seasonal base curve and a time-of-day multiplier, with
uniform jitter and randomly injected anomalies (sensor malfunction at
night, critical failure at peak, sudden performance drop, inverter
clipping) so that downstream dashboards and detectors have something to
find. Output is stochastic by design; only its distribution is stable.
"""

import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from src.domain.entities.energy import EnergyGenerationRecord
from src.shared import DEFAULT_INTERVAL_HOURS, get_logger, round_half_up

logger = get_logger(__name__)

DAYLIGHT_HOURS = (6, 18)
PEAK_HOURS = (10, 14)
DROP_HOURS = (6, 16)
CLIPPING_HOUR = 12

DAYLIGHT_MULTIPLIER = 1.2
PEAK_MULTIPLIER = 1.5

JITTER_MIN = 0.8
JITTER_SPAN = 0.4

NIGHT_GENERATION_CHANCE = 0.05
ZERO_PEAK_BAND = (0.05, 0.07)
SUDDEN_DROP_BAND = (0.07, 0.09)
SUDDEN_DROP_FACTOR = 0.1
CLIPPING_THRESHOLD = 0.99
CLIPPING_CAPACITY_WH = 350
STICKY_CLIPPING_THRESHOLD = 0.3


def _in_range(value: float, bounds: tuple) -> bool:
    low, high = bounds
    return low <= value <= high


def _in_band(value: float, band: tuple) -> bool:
    low, high = band
    return low <= value < high


def _as_utc(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def base_energy_for_month(month: int) -> int:
    """Seasonal base output in Wh for a calendar month (1-12)."""
    if 6 <= month <= 8:
        return 300
    if 3 <= month <= 5:
        return 250
    if 9 <= month <= 11:
        return 200
    return 150


def time_multiplier_for_hour(hour: int) -> float:
    """Diurnal multiplier: zero at night, higher during peak sun."""
    if not _in_range(hour, DAYLIGHT_HOURS):
        return 0.0
    if _in_range(hour, PEAK_HOURS):
        return PEAK_MULTIPLIER
    return DAYLIGHT_MULTIPLIER


class EnergyGenerator:
    """Generate synthetic energy readings for a solar unit."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Source of randomness. Defaults to a fresh ``random.Random``;
                tests pass a seeded or scripted instance.
        """
        self._rng = rng or random.Random()

    def calculate(self, timestamp: datetime) -> int:
        """
        Compute the energy generated (Wh) for the interval ending at ``timestamp``.

        A single anomaly draw is taken per call and compared against each
        anomaly band in turn, so the zero-peak and sudden-drop bands are
        mutually exclusive while clipping can still replace an earlier value.
        """
        moment = _as_utc(timestamp)
        hour = moment.hour

        base = base_energy_for_month(moment.month)
        jitter = JITTER_MIN + self._rng.random() * JITTER_SPAN
        energy = round_half_up(base * time_multiplier_for_hour(hour) * jitter)

        anomaly_chance = self._rng.random()

        if not _in_range(hour, DAYLIGHT_HOURS) and anomaly_chance < NIGHT_GENERATION_CHANCE:
            energy = round_half_up(5 + self._rng.random() * 15)
            self._log_anomaly("nighttime_generation", moment, energy)

        if _in_range(hour, PEAK_HOURS) and _in_band(anomaly_chance, ZERO_PEAK_BAND):
            energy = 0
            self._log_anomaly("zero_peak_generation", moment, energy)

        if _in_range(hour, DROP_HOURS) and _in_band(anomaly_chance, SUDDEN_DROP_BAND):
            energy = round_half_up(energy * SUDDEN_DROP_FACTOR)
            self._log_anomaly("sudden_drop", moment, energy)

        if hour == CLIPPING_HOUR and anomaly_chance > CLIPPING_THRESHOLD:
            energy = CLIPPING_CAPACITY_WH
            self._log_anomaly("inverter_clipping", moment, energy)

        return max(energy, 0)

    def generate_series(
        self,
        serial_number: str,
        start: datetime,
        end: datetime,
        interval_hours: int = DEFAULT_INTERVAL_HOURS,
    ) -> List[EnergyGenerationRecord]:
        """
        Build a contiguous historical series from ``start`` to ``end`` inclusive.

        On top of :meth:`calculate`, a reading that follows a clipped
        reading stays clipped with 70% probability.
        """
        if interval_hours <= 0:
            raise ValueError("interval_hours must be positive")

        step = timedelta(hours=interval_hours)
        current = _as_utc(start)
        last = _as_utc(end)
        records: List[EnergyGenerationRecord] = []

        while current <= last:
            energy = self.calculate(current)
            if (
                records
                and records[-1].energy_generated == CLIPPING_CAPACITY_WH
                and self._rng.random() > STICKY_CLIPPING_THRESHOLD
            ):
                energy = CLIPPING_CAPACITY_WH

            records.append(
                EnergyGenerationRecord(
                    serial_number=serial_number,
                    timestamp=current,
                    energy_generated=energy,
                    interval_hours=interval_hours,
                )
            )
            current += step

        return records

    @staticmethod
    def _log_anomaly(kind: str, timestamp: datetime, energy: int) -> None:
        logger.info(
            "energy.anomaly_injected",
            anomaly=kind,
            timestamp=timestamp.isoformat(),
            energy_generated=energy,
        )


def calculate_energy_generation(
    timestamp: datetime, rng: Optional[random.Random] = None
) -> int:
    """Convenience wrapper around :meth:`EnergyGenerator.calculate`."""
    return EnergyGenerator(rng).calculate(timestamp)


def generate_energy_series(
    serial_number: str,
    start: datetime,
    end: datetime,
    interval_hours: int = DEFAULT_INTERVAL_HOURS,
    rng: Optional[random.Random] = None,
) -> List[EnergyGenerationRecord]:
    """Convenience wrapper around :meth:`EnergyGenerator.generate_series`."""
    return EnergyGenerator(rng).generate_series(
        serial_number, start, end, interval_hours
    )
