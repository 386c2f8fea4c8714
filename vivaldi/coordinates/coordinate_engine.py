import datetime
import math
import random

from vivaldi.errors import InvalidConfigurationError
from vivaldi.logging import (
    CoordinateUpdateDebug,
    DegenerateDirectionDebug,
    LoggerStream,
    SampleRejectedWarn,
)
from vivaldi.models import (
    Coordinate,
    NetworkCoordinate,
    UpdateResponse,
    UpdateResult,
    VivaldiConfig,
)

from .vectors import random_unit_vector, unit_direction


def estimate_rtt(local: Coordinate, remote: Coordinate) -> float:
    """
    Predict the RTT between two coordinates.

    Needs no model instance, so any node can estimate the RTT between two
    peers it has only heard about, not just peers it has probed itself.
    """
    return (local - remote).magnitude()


class VivaldiModel:
    """
    Vivaldi network coordinate model for one node.

    Each call to update() treats the difference between the modeled and
    measured RTT to one peer as the tension in a spring between the two
    nodes, and moves the local coordinate a step along it. The step is
    scaled by how much the local node trusts its own position relative to
    the peer's.

    Single writer only. Callers sharing a model between threads must
    serialize their calls to update().
    """

    def __init__(
        self,
        config: VivaldiConfig | None = None,
        dimensions: int = 8,
        ce: float = 0.25,
        cc: float = 0.25,
        rng: random.Random | None = None,
        seed: int | None = None,
        logger: LoggerStream | None = None,
    ) -> None:
        # Use config if provided, otherwise use individual parameters
        self._config = config or VivaldiConfig(
            dimensions=dimensions,
            ce=ce,
            cc=cc,
            seed=seed,
        )
        self._config.validate()

        self._dimensions = self._config.dimensions
        self._ce = self._config.ce
        self._cc = self._config.cc
        self._zero_threshold = self._config.zero_threshold

        if rng is not None and seed is not None:
            raise InvalidConfigurationError(
                "Err. - pass either rng or seed, not both"
            )

        if seed is None:
            seed = self._config.seed

        self._rng = rng or random.Random(seed)
        self._logger = logger

        self._coordinate = Coordinate.origin(self._dimensions)
        self._error = self._config.initial_error
        self._sample_count = 0

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def sample_count(self) -> int:
        return self._sample_count

    def local_coordinate(self) -> Coordinate:
        return self._coordinate

    def local_error(self) -> float:
        return self._error

    def snapshot(self) -> NetworkCoordinate:
        return NetworkCoordinate(
            vec=self._coordinate,
            error=self._error,
            sample_count=self._sample_count,
        )

    def get_config(self) -> VivaldiConfig:
        return self._config

    def estimate_rtt_to(self, remote: Coordinate) -> float:
        return estimate_rtt(self._coordinate, remote)

    def observe(
        self,
        remote: NetworkCoordinate,
        rtt: float | datetime.timedelta,
    ) -> UpdateResponse:
        """
        Fold in a sample using a peer's piggybacked snapshot.

        Args:
            remote: The coordinate and error the peer attached to its message
            rtt: Measured round-trip time, as seconds or a timedelta

        Returns:
            The UpdateResponse from update()
        """
        if isinstance(rtt, datetime.timedelta):
            rtt = rtt.total_seconds()

        return self.update(remote.vec, remote.error, rtt)

    def update(
        self,
        remote_coordinate: Coordinate,
        remote_error: float,
        measured_rtt: float,
    ) -> UpdateResponse:
        """
        Fold one RTT observation into the local coordinate and error.

        Every new value is computed before any is assigned, so a rejected
        sample leaves the model exactly as it was.

        Args:
            remote_coordinate: The peer's self-reported coordinate
            remote_error: The peer's self-reported error estimate
            measured_rtt: Round-trip time to the peer, in the same units
                as the coordinate space

        Returns:
            UpdateResponse describing the outcome and resulting state
        """
        if rejected := self._validate(remote_coordinate, remote_error, measured_rtt):
            return rejected

        difference = self._coordinate - remote_coordinate
        estimated_rtt = difference.magnitude()

        relative_error = min(
            1.0,
            abs(estimated_rtt - measured_rtt) / measured_rtt,
        )

        weight = self._weight(self._error, remote_error)
        smoothing = self._ce * weight

        error = self._clamp(
            relative_error * smoothing + self._error * (1.0 - smoothing),
            0.0,
            1.0,
        )

        delta = self._cc * weight

        direction = unit_direction(difference, self._zero_threshold)
        if direction is None:
            direction = random_unit_vector(
                self._dimensions,
                self._rng,
                self._zero_threshold,
            )

            if self._logger:
                self._logger.log(
                    DegenerateDirectionDebug(
                        message="Coordinates coincide, pushing apart in a random direction",
                        dimensions=self._dimensions,
                        separation=estimated_rtt,
                    )
                )

        force = measured_rtt - estimated_rtt
        coordinate = self._coordinate + direction * (delta * force)

        self._coordinate = coordinate
        self._error = error
        self._sample_count += 1

        if self._logger:
            self._logger.log(
                CoordinateUpdateDebug(
                    message="Applied RTT sample",
                    dimensions=self._dimensions,
                    estimated_rtt=estimated_rtt,
                    measured_rtt=measured_rtt,
                    relative_error=relative_error,
                    weight=weight,
                    local_error=error,
                )
            )

        return UpdateResponse(
            result=UpdateResult.SUCCESS,
            coordinate=coordinate,
            error=error,
            estimated_rtt=estimated_rtt,
            relative_error=relative_error,
            weight=weight,
            remote_dimensions=remote_coordinate.dimensions,
        )

    def is_converged(self) -> bool:
        """
        A model is converged once its error is at or below the
        convergence threshold and it has accepted enough samples.
        """
        error_converged = self._error <= self._config.convergence_error_threshold
        samples_sufficient = self._sample_count >= self._config.convergence_min_samples

        return error_converged and samples_sufficient

    def _validate(
        self,
        remote_coordinate: Coordinate,
        remote_error: float,
        measured_rtt: float,
    ) -> UpdateResponse | None:
        result: UpdateResult | None = None
        message = ""

        if remote_coordinate.dimensions != self._dimensions:
            result = UpdateResult.DIMENSION_MISMATCH
            message = (
                f"remote coordinate has {remote_coordinate.dimensions} "
                f"dimensions, expected {self._dimensions}"
            )

        elif not math.isfinite(measured_rtt) or measured_rtt <= 0.0:
            result = UpdateResult.INVALID_SAMPLE
            message = f"measured RTT must be finite and positive, got {measured_rtt}"

        elif not math.isfinite(remote_error) or remote_error < 0.0:
            result = UpdateResult.INVALID_ERROR_ESTIMATE
            message = f"remote error must be finite and non-negative, got {remote_error}"

        if result is None:
            return None

        if self._logger:
            self._logger.log(
                SampleRejectedWarn(
                    message=message,
                    reason=result.value,
                    measured_rtt=measured_rtt,
                    remote_error=remote_error,
                    remote_dimensions=remote_coordinate.dimensions,
                )
            )

        return UpdateResponse(
            result=result,
            coordinate=self._coordinate,
            error=self._error,
            message=message,
            remote_dimensions=remote_coordinate.dimensions,
        )

    @staticmethod
    def _weight(local_error: float, remote_error: float) -> float:
        denom = local_error + remote_error
        if denom <= 0.0:
            return 0.5
        return local_error / denom

    @staticmethod
    def _clamp(value: float, min_value: float, max_value: float) -> float:
        return max(min_value, min(max_value, value))
