"""Run configuration for the ``modify`` command."""

from dataclasses import dataclass
from typing import Optional

from zsw.acceleration import (
    DEFAULT_FRICTION,
    DEFAULT_LOC_NEEDED_FRICTION,
    DEFAULT_MU_NEEDED_FRICTION,
    friction_multiplier,
)
from zsw.delay import DEFAULT_AMBIENT_DEVIATION, DEFAULT_AMPLITUDE, DEFAULT_LAMBDA, DelayModel
from zsw.departures import DEFAULT_FACTOR, DEFAULT_MAX_DELAY_MINUTES
from zsw.errors import InvalidDistributionParameters

DEFAULT_EXTENSION = "trn"


class ConfigError(ValueError):
    pass


@dataclass
class WeatherConfig:
    """Weather parameters; ``None`` switches the corresponding effect off."""
    multiplier: Optional[float] = None
    friction: float = DEFAULT_FRICTION
    loc_needed_friction: float = DEFAULT_LOC_NEEDED_FRICTION
    mu_needed_friction: float = DEFAULT_MU_NEEDED_FRICTION

    delay_probability: Optional[float] = None
    delay_amplitude: float = DEFAULT_AMPLITUDE
    delay_lambda: float = DEFAULT_LAMBDA
    ambient_mean: Optional[float] = None
    ambient_deviation: float = DEFAULT_AMBIENT_DEVIATION
    deny_early: bool = False

    departures_delay_factor: float = DEFAULT_FACTOR
    departures_max_delay: float = DEFAULT_MAX_DELAY_MINUTES  # minutes

    seed: Optional[int] = None
    extension: str = DEFAULT_EXTENSION

    @classmethod
    def from_args(cls, args) -> "WeatherConfig":
        return cls(
            multiplier=args.multiplier,
            friction=args.friction,
            loc_needed_friction=args.loc_needed_friction,
            mu_needed_friction=args.mu_needed_friction,
            delay_probability=args.delay_probability,
            delay_amplitude=args.delay_amplitude,
            delay_lambda=args.delay_lambda,
            ambient_mean=args.ambient_mean,
            ambient_deviation=args.ambient_deviation,
            deny_early=args.deny_early,
            departures_delay_factor=args.departures_delay_factor,
            departures_max_delay=args.departures_max_delay,
            seed=args.seed,
            extension=args.extension,
        )

    def validate(self) -> None:
        if self.delay_probability is not None and not 0.0 <= self.delay_probability <= 1.0:
            raise ConfigError(f"delay probability must lie in [0, 1], got {self.delay_probability}")
        for name in ("friction", "loc_needed_friction", "mu_needed_friction"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.ambient_mean is not None and self.ambient_deviation <= 0:
            raise InvalidDistributionParameters(
                f"ambient deviation must be positive, got {self.ambient_deviation}"
            )
        if self.departures_delay_factor < 0 or self.departures_max_delay < 0:
            raise ConfigError("departure factor and maximum delay must not be negative")

    @property
    def locomotive_multiplier(self) -> float:
        return friction_multiplier(self.friction, self.loc_needed_friction, self.multiplier)

    @property
    def multiple_unit_multiplier(self) -> float:
        return friction_multiplier(self.friction, self.mu_needed_friction, self.multiplier)

    @property
    def max_wait_seconds(self) -> float:
        return self.departures_max_delay * 60

    @property
    def modifies_acceleration(self) -> bool:
        return (
            self.multiplier is not None
            or self.locomotive_multiplier != 1.0
            or self.multiple_unit_multiplier != 1.0
        )

    @property
    def delays_entry(self) -> bool:
        return self.delay_model().active

    @property
    def adjusts_departures(self) -> bool:
        return self.departures_delay_factor != 1.0

    def delay_model(self) -> DelayModel:
        return DelayModel(
            probability=self.delay_probability,
            amplitude=self.delay_amplitude,
            lam=self.delay_lambda,
            ambient_mean=self.ambient_mean,
            ambient_deviation=self.ambient_deviation,
            deny_early=self.deny_early,
        )
