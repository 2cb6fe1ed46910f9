"""Adaptive baseline learning of each device's idle telemetry.

The first :data:`SAMPLES_REQUIRED` samples of a device are averaged into an
idle baseline; later readings are reported relative to that baseline so the
same visual response follows a given percentage change on any hardware.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "SAMPLES_REQUIRED",
    "WORKLOAD_THRESHOLD",
    "DeviceBaseline",
    "AdaptiveBaseline",
]

SAMPLES_REQUIRED = 20
WORKLOAD_THRESHOLD = 0.20


@dataclass
class DeviceBaseline:
    """Idle-state baseline of one device, learned from its first samples."""

    power_baseline: float = 0.0
    current_baseline: float = 0.0
    temp_baseline: float = 0.0
    aiclk_baseline: float = 0.0
    _samples: int = field(default=0, init=False, repr=False)
    _power_sum: float = field(default=0.0, init=False, repr=False)
    _current_sum: float = field(default=0.0, init=False, repr=False)
    _temp_sum: float = field(default=0.0, init=False, repr=False)
    _aiclk_sum: float = field(default=0.0, init=False, repr=False)

    @property
    def samples_collected(self) -> int:
        """Number of samples taken into the baseline so far."""
        return self._samples

    def add_sample(self, power: float, current: float, temp: float, aiclk: float) -> None:
        """Add a sample; once enough are collected the averages are fixed."""
        if self._samples >= SAMPLES_REQUIRED:
            return
        self._power_sum += power
        self._current_sum += current
        self._temp_sum += temp
        self._aiclk_sum += aiclk
        self._samples += 1
        if self._samples == SAMPLES_REQUIRED:
            self.power_baseline = self._power_sum / SAMPLES_REQUIRED
            self.current_baseline = self._current_sum / SAMPLES_REQUIRED
            self.temp_baseline = self._temp_sum / SAMPLES_REQUIRED
            self.aiclk_baseline = self._aiclk_sum / SAMPLES_REQUIRED

    def is_established(self) -> bool:
        """True once enough samples have been collected."""
        return self._samples >= SAMPLES_REQUIRED

    def progress(self) -> float:
        """Learning progress from 0.0 to 1.0."""
        return self._samples / SAMPLES_REQUIRED

    @staticmethod
    def relative_change(current_value: float, baseline_value: float) -> float:
        """Change relative to a baseline (0.1 is a 10% rise); 0.0 for a non-positive baseline."""
        if baseline_value <= 0.0:
            return 0.0
        return (current_value - baseline_value) / baseline_value

    def _change(self, value: float, baseline: float) -> float:
        if not self.is_established():
            return 0.0
        return self.relative_change(value, baseline)

    def power_change(self, current_power: float) -> float:
        """Relative power change from baseline."""
        return self._change(current_power, self.power_baseline)

    def current_change(self, current_current: float) -> float:
        """Relative current change from baseline."""
        return self._change(current_current, self.current_baseline)

    def temp_change(self, current_temp: float) -> float:
        """Relative temperature change from baseline."""
        return self._change(current_temp, self.temp_baseline)

    def aiclk_change(self, current_aiclk: float) -> float:
        """Relative AICLK change from baseline."""
        return self._change(current_aiclk, self.aiclk_baseline)


class AdaptiveBaseline:
    """Baselines for every device seen, keyed by device index."""

    def __init__(self) -> None:
        self._devices: dict[int, DeviceBaseline] = {}
        self._all_established = False

    def update(self, device_idx: int, power: float, current: float, temp: float, aiclk: float) -> None:
        """Feed one telemetry sample for a device."""
        baseline = self._devices.setdefault(device_idx, DeviceBaseline())
        baseline.add_sample(power, current, temp, aiclk)
        self._all_established = all(b.is_established() for b in self._devices.values())

    def is_established(self) -> bool:
        """True once every known device has a baseline, and at least one is known."""
        return self._all_established and bool(self._devices)

    def progress(self) -> float:
        """Lowest learning progress across devices, or 0.0 with none."""
        return min((b.progress() for b in self._devices.values()), default=0.0)

    def samples_collected(self, device_idx: int) -> int:
        """Samples collected for a device; 0 if it is unknown."""
        baseline = self._devices.get(device_idx)
        return baseline.samples_collected if baseline else 0

    def get_baseline(self, device_idx: int) -> DeviceBaseline | None:
        """The baseline of a device, or None if it is unknown."""
        return self._devices.get(device_idx)

    def power_change(self, device_idx: int, current_power: float) -> float:
        """Relative power change of a device; 0.0 if it is unknown."""
        baseline = self._devices.get(device_idx)
        return baseline.power_change(current_power) if baseline else 0.0

    def current_change(self, device_idx: int, current_current: float) -> float:
        """Relative current change of a device; 0.0 if it is unknown."""
        baseline = self._devices.get(device_idx)
        return baseline.current_change(current_current) if baseline else 0.0

    def temp_change(self, device_idx: int, current_temp: float) -> float:
        """Relative temperature change of a device; 0.0 if it is unknown."""
        baseline = self._devices.get(device_idx)
        return baseline.temp_change(current_temp) if baseline else 0.0

    def max_activity(self) -> float:
        """System-wide activity level.

        Baselines alone hold no live readings, so this is always 0.0.
        """
        return 0.0

    def workload_detected(self, device_idx: int, current_power: float, current_current: float) -> bool:
        """True if power or current is more than 20% above the device's baseline."""
        if not self.is_established():
            return False
        return (
            self.power_change(device_idx, current_power) > WORKLOAD_THRESHOLD
            or self.current_change(device_idx, current_current) > WORKLOAD_THRESHOLD
        )