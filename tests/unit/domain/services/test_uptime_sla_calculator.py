"""Unit tests for UptimeSlaCalculator service."""

import pytest

from uptime_sla.domain.entities.uptime_series import AvailabilityPolicy, UptimeState
from uptime_sla.domain.services.series_validator import InvalidArgumentError
from uptime_sla.domain.services.uptime_sla_calculator import UptimeSlaCalculator

UP = UptimeState.UP
DOWN = UptimeState.DOWN
OPEN = UptimeState.OPEN


@pytest.fixture
def calculator():
    """Create calculator instance for testing."""
    return UptimeSlaCalculator()


class TestReferenceSeries:
    """Tests against the 30-sample reference series over [10000, 13000]."""

    def test_connectivity_availability(self, calculator, reference_series, reference_window):
        """Test that 18 of 30 intervals carry a positive reading."""
        start_time, end_time = reference_window
        result = calculator.connectivity_availability(
            start_time, end_time, reference_series.timestamps, reference_series.values
        )
        assert result == pytest.approx(1800 / 3000)

    def test_uptime_availability(self, calculator, reference_series, reference_window):
        """Test that 2020 units of spread uptime are counted."""
        start_time, end_time = reference_window
        result = calculator.uptime_availability(
            start_time, end_time, reference_series.timestamps, reference_series.values
        )
        assert result == pytest.approx(2020 / 3000)

    def test_policy1_availability(self, calculator, reference_series, reference_window):
        """Test SLA 1 on the reference series."""
        start_time, end_time = reference_window
        result = calculator.policy1_availability(
            start_time, end_time, reference_series.timestamps, reference_series.values
        )
        assert result == pytest.approx(1650 / 3000)

    def test_policy2_availability(self, calculator, reference_series, reference_window):
        """Test that the two maintenance samples are credited under SLA 2."""
        start_time, end_time = reference_window
        result = calculator.policy2_availability(
            start_time,
            end_time,
            reference_series.timestamps,
            reference_series.values,
            reference_series.exceptions,
        )
        assert result == pytest.approx(1850 / 3000)

    def test_state_series(self, calculator, reference_series, reference_window):
        """Test up/down/open labels of the reference series."""
        start_time, end_time = reference_window
        states = calculator.state_series(
            start_time, end_time, reference_series.timestamps, reference_series.values
        )
        assert states == (
            [DOWN, DOWN] + [UP] * 19 + [DOWN] * 3 + [UP] * 3 + [OPEN] * 3
        )

    def test_policy2_without_exceptions_matches_policy1(
        self, calculator, reference_series, reference_window
    ):
        """Test that SLA 2 with no exception flags equals SLA 1."""
        start_time, end_time = reference_window
        args = (start_time, end_time, reference_series.timestamps, reference_series.values)

        assert calculator.policy2_availability(
            *args, [False] * len(reference_series)
        ) == calculator.policy1_availability(*args)


class TestAvailability:
    """Tests for individual policy behaviour on small series."""

    def test_trailing_window_is_uncounted(self, calculator):
        """Test that time after the last sample counts as unavailable."""
        args = (0, 40, [10, 20], [10, 20])

        assert calculator.connectivity_availability(*args) == pytest.approx(0.5)
        assert calculator.uptime_availability(*args) == pytest.approx(0.5)
        assert calculator.policy1_availability(*args) == pytest.approx(0.5)

    def test_fully_up_device(self, calculator):
        """Test that a steadily advancing counter yields 1.0 everywhere."""
        args = (0, 30, [10, 20, 30], [10, 20, 30])

        assert calculator.connectivity_availability(*args) == 1.0
        assert calculator.uptime_availability(*args) == 1.0
        assert calculator.policy1_availability(*args) == 1.0
        assert calculator.policy2_availability(*args, [False, False, False]) == 1.0

    def test_never_up_device(self, calculator):
        """Test that an all-zero series yields 0.0 everywhere."""
        args = (0, 30, [10, 20, 30], [0, 0, 0])

        assert calculator.connectivity_availability(*args) == 0.0
        assert calculator.uptime_availability(*args) == 0.0
        assert calculator.policy1_availability(*args) == 0.0

    def test_policy1_ignores_uptime_before_first_positive_reading(self, calculator):
        """Test that redistributed uptime before observation began is dropped."""
        args = (0, 40, [10, 20, 30, 40], [0, 0, 25, 35])

        # Spread credits [5, 10, 10, 10]; SLA 1 drops the first two intervals
        assert calculator.uptime_availability(*args) == pytest.approx(35 / 40)
        assert calculator.policy1_availability(*args) == pytest.approx(20 / 40)

    def test_policy1_connectivity_drop_counts_as_down(self, calculator):
        """Test that a zero reading while the device accumulated uptime is down."""
        args = (0, 40, [10, 20, 30, 40], [10, 20, 0, 40])

        assert calculator.uptime_availability(*args) == 1.0
        assert calculator.policy1_availability(*args) == pytest.approx(30 / 40)

    def test_policy1_open_tail_is_uncounted(self, calculator):
        """Test that the trailing run of zero readings is never credited."""
        args = (0, 40, [10, 20, 30, 40], [10, 20, 0, 0])
        assert calculator.policy1_availability(*args) == pytest.approx(20 / 40)

    def test_policy2_exception_in_open_tail_is_credited(self, calculator):
        """Test that an exception sample survives the open-end correction."""
        args = (0, 40, [10, 20, 30, 40], [10, 20, 0, 0])

        result = calculator.policy2_availability(*args, [False, False, True, False])

        assert result == pytest.approx(30 / 40)
        assert result >= calculator.policy1_availability(*args)

    def test_policy2_exception_before_first_positive_reading(self, calculator):
        """Test that an exception is credited even while the series is still open."""
        args = (0, 40, [10, 20, 30, 40], [0, 0, 10, 20])

        assert calculator.policy1_availability(*args) == pytest.approx(20 / 40)
        assert calculator.policy2_availability(
            *args, [True, False, False, False]
        ) == pytest.approx(30 / 40)

    def test_policy2_requires_exceptions(self, calculator):
        """Test that SLA 2 rejects a missing exception list."""
        with pytest.raises(InvalidArgumentError, match="Exceptions are required"):
            calculator.policy2_availability(0, 30, [10, 20, 30], [1, 2, 3], None)

    def test_policy2_rejects_exception_length_mismatch(self, calculator):
        """Test that SLA 2 validates the exception flags."""
        with pytest.raises(InvalidArgumentError):
            calculator.policy2_availability(0, 30, [10, 20, 30], [1, 2, 3], [True])

    @pytest.mark.parametrize(
        "policy",
        [
            AvailabilityPolicy.CONNECTIVITY,
            AvailabilityPolicy.UPTIME,
            AvailabilityPolicy.SLA_1,
            AvailabilityPolicy.SLA_2,
        ],
    )
    def test_availability_dispatch(self, calculator, policy, reference_series, reference_window):
        """Test that availability() matches the dedicated method per policy."""
        start_time, end_time = reference_window
        ts, vals, exc = (
            reference_series.timestamps,
            reference_series.values,
            reference_series.exceptions,
        )
        expected = {
            AvailabilityPolicy.CONNECTIVITY: calculator.connectivity_availability(
                start_time, end_time, ts, vals
            ),
            AvailabilityPolicy.UPTIME: calculator.uptime_availability(
                start_time, end_time, ts, vals
            ),
            AvailabilityPolicy.SLA_1: calculator.policy1_availability(
                start_time, end_time, ts, vals
            ),
            AvailabilityPolicy.SLA_2: calculator.policy2_availability(
                start_time, end_time, ts, vals, exc
            ),
        }[policy]

        assert calculator.availability(policy, start_time, end_time, ts, vals, exc) == expected


class TestStateSeries:
    """Tests for per-sample state classification."""

    def test_open_tail(self, calculator):
        """Test that trailing zero readings are labelled open."""
        states = calculator.state_series(0, 40, [10, 20, 30, 40], [10, 20, 0, 0])
        assert states == [UP, UP, OPEN, OPEN]

    def test_zero_reading_mid_series_is_down(self, calculator):
        """Test that a reset followed by recovery is down, not open."""
        states = calculator.state_series(0, 30, [10, 20, 30], [10, 0, 10])
        assert states == [UP, DOWN, UP]

    def test_all_zero_series_is_open(self, calculator):
        """Test that a series without a positive reading is entirely open."""
        states = calculator.state_series(0, 30, [10, 20, 30], [0, 0, 0])
        assert states == [OPEN, OPEN, OPEN]

    def test_one_state_per_sample(self, calculator):
        """Test that the trailing window interval gets no label."""
        states = calculator.state_series(0, 100, [10, 20], [10, 20])
        assert len(states) == 2


class TestProperties:
    """Invariants that hold for every valid input."""

    SERIES = [
        (0, 40, [10, 20, 30, 40], [10, 20, 0, 40], [False, True, False, False]),
        (0, 100, [10, 20, 30], [1000, 5, 2000], [True, True, True]),
        (5, 5, [5], [7], [False]),
        (0, 60, [10, 10, 20, 50], [5, 8, 0, 0], [False, False, False, True]),
        (0, 1000, [100, 200, 300], [-5, 50, 40], [False, False, False]),
    ]

    @pytest.mark.parametrize("start_time,end_time,timestamps,values,exceptions", SERIES)
    def test_results_within_unit_interval(
        self, calculator, start_time, end_time, timestamps, values, exceptions
    ):
        """Test that every policy yields a ratio in [0, 1]."""
        for policy in AvailabilityPolicy:
            result = calculator.availability(
                policy, start_time, end_time, timestamps, values, exceptions
            )
            assert 0.0 <= result <= 1.0

    @pytest.mark.parametrize("start_time,end_time,timestamps,values,exceptions", SERIES)
    def test_idempotent_and_inputs_untouched(
        self, calculator, start_time, end_time, timestamps, values, exceptions
    ):
        """Test that repeated calls agree and never modify caller lists."""
        snapshot = (list(timestamps), list(values), list(exceptions))

        first = calculator.policy2_availability(
            start_time, end_time, timestamps, values, exceptions
        )
        second = calculator.policy2_availability(
            start_time, end_time, timestamps, values, exceptions
        )

        assert first == second
        assert (timestamps, values, exceptions) == snapshot

    @pytest.mark.parametrize("values", [[10, 20, 30], [10, 20, 0]])
    def test_flat_sample_at_window_end_does_not_increase_policy1(self, calculator, values):
        """Test that repeating the last reading at end_time never raises SLA 1."""
        timestamps = [10, 20, 30]
        before = calculator.policy1_availability(0, 50, timestamps, values)
        after = calculator.policy1_availability(
            0, 50, timestamps + [50], values + [values[-1]]
        )
        assert after <= before

    def test_exception_never_lowers_policy2(self, calculator, reference_series, reference_window):
        """Test that flagging a zeroed sample as exception raises or keeps SLA 2."""
        start_time, end_time = reference_window
        args = (start_time, end_time, reference_series.timestamps, reference_series.values)
        exceptions = [False] * len(reference_series)
        exceptions[15] = True  # connectivity drop zeroed by SLA 1

        assert calculator.policy2_availability(
            *args, exceptions
        ) >= calculator.policy1_availability(*args)

    def test_single_sample_zero_length_window(self, calculator):
        """Test that a window of zero length yields 0.0 instead of failing."""
        args = (100, 100, [100], [5])

        assert calculator.connectivity_availability(*args) == 0.0
        assert calculator.uptime_availability(*args) == 0.0
        assert calculator.policy1_availability(*args) == 0.0
        assert calculator.policy2_availability(*args, [True]) == 0.0
        assert calculator.state_series(*args) == [DOWN]


class TestValidation:
    """Tests that every operation validates before computing."""

    @pytest.mark.parametrize(
        "start_time,end_time,timestamps,values",
        [
            (-1, 40, [10], [1]),
            (0, 40, [], []),
            (0, 40, [5, 3], [1, 2]),
            (0, 40, [10, 20], [1]),
        ],
    )
    def test_invalid_input_rejected_by_every_operation(
        self, calculator, start_time, end_time, timestamps, values
    ):
        """Test that malformed input raises InvalidArgumentError everywhere."""
        exceptions = [False] * len(timestamps)
        operations = [
            lambda: calculator.validate(start_time, end_time, timestamps, values),
            lambda: calculator.connectivity_availability(start_time, end_time, timestamps, values),
            lambda: calculator.uptime_availability(start_time, end_time, timestamps, values),
            lambda: calculator.policy1_availability(start_time, end_time, timestamps, values),
            lambda: calculator.policy2_availability(
                start_time, end_time, timestamps, values, exceptions
            ),
            lambda: calculator.state_series(start_time, end_time, timestamps, values),
        ]
        for operation in operations:
            with pytest.raises(InvalidArgumentError):
                operation()
