import io
import unittest
from unittest import mock

import microbench as mb
from microbench.errors import PreconditionError
from microbench.testutils import FakeClock, TickingOperation


def test_package_exports():
    assert callable(mb.benchmark)
    assert callable(mb.format_time)
    assert callable(mb.measure)
    assert callable(mb.measure_loops)
    assert callable(mb.suggest_loops)
    assert mb.TimeitResult is not None
    assert issubclass(mb.PreconditionError, mb.MicrobenchError)
    assert mb.config.DEFAULT_ITERATIONS == 7
    assert isinstance(mb.__version__, str)


class TestBenchmark(unittest.TestCase):
    def test_noop_end_to_end(self):
        out = io.StringIO()

        result = mb.benchmark("noop", lambda: None, loops=100, iterations=3, file=out)

        assert result.loops == 100
        assert result.iterations == 3
        assert result.success_count == 300
        assert result.total >= 0
        assert 0 <= result.best <= result.mean <= result.worst
        assert out.getvalue().startswith("noop: Loops: 100. Iterations: 3. Success count: 300.\n")
        assert out.getvalue() == str(result) + "\n"

    def test_prints_to_stdout_by_default(self):
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            result = mb.benchmark("noop", lambda: None, loops=2, iterations=2)

        assert stdout.getvalue() == str(result) + "\n"

    def test_deterministic_with_fake_clock(self):
        clock = FakeClock()
        op = TickingOperation(clock, [100, 300])

        result = mb.benchmark(
            "tick", op, loops=2, iterations=3, clock=clock, file=io.StringIO()
        )

        assert op.calls == 6
        assert result.iter_loop_times == ((100, 300),) * 3
        assert result.total == 1200
        assert result.mean == 200.0
        assert result.std_dev == 100.0
        assert result.diff == 3.0
        assert result.warning is not None

    def test_suggests_loops_when_not_given(self):
        with mock.patch("microbench.api.suggest_loops", return_value=2) as mock_suggest:
            result = mb.benchmark("noop", lambda: None, file=io.StringIO())

        mock_suggest.assert_called_once()
        assert result.loops == 2
        assert result.iterations == mb.config.DEFAULT_ITERATIONS
        assert result.success_count == 2 * mb.config.DEFAULT_ITERATIONS

    def test_failures_reduce_success_count(self):
        clock = FakeClock()
        op = TickingOperation(clock, [50], fail_on={2, 5, 6})

        result = mb.benchmark(
            "flaky", op, loops=3, iterations=2, clock=clock, file=io.StringIO()
        )

        assert result.success_count == 3
        assert result.iter_loop_times == ((50, 50), (50,))
        assert "Success count: 3." in str(result)

    def test_invalid_counts(self):
        for kwargs in [{"loops": 0}, {"loops": 1, "iterations": 0}, {"iterations": 0}]:
            with self.subTest(**kwargs):
                func = mock.Mock()
                out = io.StringIO()

                with self.assertRaises(ValueError):
                    mb.benchmark("bad", func, file=out, **kwargs)

                func.assert_not_called()
                assert out.getvalue() == ""

    def test_invalid_iterations_skip_loop_suggestion(self):
        clock = FakeClock()
        op = TickingOperation(clock, [1_000])

        with mock.patch("microbench.api.suggest_loops") as mock_suggest:
            with self.assertRaises(ValueError):
                mb.benchmark("bad", op, iterations=0, clock=clock, file=io.StringIO())

        mock_suggest.assert_not_called()
        assert op.calls == 0

    def test_invalid_precision_prints_nothing(self):
        func = mock.Mock()
        out = io.StringIO()

        with self.assertRaises(PreconditionError):
            mb.benchmark("bad", func, loops=1, precision=0, file=out)

        func.assert_not_called()
        assert out.getvalue() == ""

    def test_progress_bar(self):
        with mock.patch("microbench.api.tqdm", side_effect=lambda it, **_: it) as mock_tqdm:
            mb.benchmark(
                "noop", lambda: None, loops=1, iterations=2, progress=True, file=io.StringIO()
            )

        mock_tqdm.assert_called_once()
        assert mock_tqdm.call_args.kwargs["desc"] == "noop"

    def test_no_progress_bar_by_default(self):
        with mock.patch("microbench.api.tqdm") as mock_tqdm:
            mb.benchmark("noop", lambda: None, loops=1, iterations=2, file=io.StringIO())

        mock_tqdm.assert_not_called()
