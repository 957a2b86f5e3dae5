"""Tests for performance profiler."""

import pytest
from json_roundtrip.profiler import PerformanceProfiler


class TestPerformanceProfiler:
    """Tests for PerformanceProfiler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.profiler = PerformanceProfiler()

    def test_profile_operation(self):
        """Test profiling one operation through the context manager."""
        with self.profiler.profile_operation("round_trip_compact", input_size=100) as profiler:
            profiler.sample_performance()
            profiler.record_output(40)

        metrics = self.profiler.last_metrics
        assert metrics.operation_name == "round_trip_compact"
        assert metrics.input_size == 100
        assert metrics.output_size == 40
        assert metrics.size_ratio == pytest.approx(0.4)
        assert metrics.duration >= 0
        assert metrics.memory_peak_mb >= metrics.memory_start_mb > 0

    def test_stop_without_start(self):
        """Test that stopping an inactive profiler is an error."""
        with pytest.raises(ValueError, match="No active profiling session"):
            self.profiler.stop_profiling()

    def test_sample_without_operation_is_noop(self):
        """Test sampling outside an operation."""
        self.profiler.sample_performance()
        assert self.profiler.last_metrics is None

    def test_last_metrics_replaced_per_operation(self):
        """Test that each operation replaces the previous metrics."""
        for size in (10, 30):
            with self.profiler.profile_operation(f"op_{size}", input_size=size) as profiler:
                profiler.record_output(size // 2)

        assert self.profiler.last_metrics.operation_name == "op_30"
        assert self.profiler.last_metrics.output_size == 15
