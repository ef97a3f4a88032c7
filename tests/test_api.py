"""Tests for the HTTP layer — route functions called directly.

Verifies that:
1. Draw endpoints return the same sequence as an in-process engine
2. InvalidArgument surfaces as HTTP 422
3. The shared generator is serialized across threads
4. Seed / state / snapshot / reseed endpoints behave
"""

import threading

import pytest
from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from mt64.api import dependencies
from mt64.api.app import create_app
from mt64.api.generator_manager import GeneratorManager
from mt64.api.routes.config import get_config
from mt64.api.routes.control import reseed
from mt64.api.routes.draw import draw
from mt64.api.routes.state import get_seed, get_snapshot, get_state, put_snapshot
from mt64.api.schemas import SnapshotSchema
from mt64.config import EngineConfig
from mt64.core.enums import Distribution
from mt64.systems.mersenne import MersenneTwister64


def _manager(seed: int = 5489, **kwargs) -> GeneratorManager:
    return GeneratorManager(EngineConfig(seed=seed, **kwargs))


def _draw(manager, distribution, count=1, bound=None, low=None, high=None):
    return draw(distribution, count=count, bound=bound, low=low, high=high, manager=manager)


# ---------------------------------------------------------------------------
# Draw
# ---------------------------------------------------------------------------

class TestDrawEndpoint:

    def test_raw_matches_reference(self):
        resp = _draw(_manager(), "raw")
        assert resp.values == [14514284786278117030]
        assert resp.distribution == "raw"
        assert resp.cursor == 1

    def test_sequence_matches_engine(self):
        mgr = _manager(seed=42)
        mt = MersenneTwister64(42)
        assert _draw(mgr, "uniform", 5).values == [mt.uniform() for _ in range(5)]
        assert _draw(mgr, "randint", 5, bound=10).values == [mt.randint(10) for _ in range(5)]
        assert _draw(mgr, "randfloat", 5, bound=2.5).values == [mt.randfloat(2.5) for _ in range(5)]
        assert _draw(mgr, "randdouble", 5, bound=2.5).values == [mt.randdouble(2.5) for _ in range(5)]
        assert _draw(mgr, "randrange", 5, low=-4, high=4).values == [mt.randrange(-4, 4) for _ in range(5)]

    @pytest.mark.parametrize(
        "distribution,kwargs",
        [
            ("gaussian", {}),
            ("randint", {}),
            ("randint", {"bound": 0.0}),
            ("randint", {"bound": 2.5}),
            ("randfloat", {"bound": -1.0}),
            ("randdouble", {"bound": 0.0}),
            ("randrange", {"low": 5, "high": 5}),
            ("randrange", {"low": 5}),
        ],
    )
    def test_invalid_arguments_are_422(self, distribution, kwargs):
        mgr = _manager()
        with pytest.raises(HTTPException) as info:
            _draw(mgr, distribution, 3, **kwargs)
        assert info.value.status_code == 422
        assert get_state(manager=mgr).cursor == 312

    def test_randint_accepts_integral_bound(self):
        mgr = _manager(seed=3)
        mt = MersenneTwister64(3)
        assert _draw(mgr, "randint", 4, bound=10).values == [mt.randint(10) for _ in range(4)]
        assert _draw(mgr, "randint", 4, bound=10.0).values == [mt.randint(10) for _ in range(4)]

    def test_batch_limit(self):
        mgr = _manager(max_batch=10)
        with pytest.raises(HTTPException) as info:
            _draw(mgr, "uniform", 11)
        assert info.value.status_code == 422
        assert len(_draw(mgr, "uniform", 10).values) == 10

    def test_concurrent_draws_are_serialized(self):
        mgr = _manager(seed=7)
        results: list[list[int]] = []
        lock = threading.Lock()

        def worker():
            for _ in range(20):
                values = _draw(mgr, "raw", 25).values
                with lock:
                    results.append(values)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        drawn = [v for batch in results for v in batch]
        mt = MersenneTwister64(7)
        assert sorted(drawn) == sorted(mt.extract_word() for _ in range(len(drawn)))
        assert mgr.draws_served == 4 * 20 * 25
        # Each batch is a contiguous run of the sequence
        mt = MersenneTwister64(7)
        sequence = [mt.extract_word() for _ in range(len(drawn))]
        index = {v: i for i, v in enumerate(sequence)}
        for batch in results:
            start = index[batch[0]]
            assert batch == sequence[start:start + len(batch)]


# ---------------------------------------------------------------------------
# State / control / config
# ---------------------------------------------------------------------------

class TestStateEndpoints:

    def test_seed_drifts_after_first_draw(self):
        mgr = _manager()
        assert get_seed(manager=mgr).seed == 5489
        _draw(mgr, "raw")
        resp = get_seed(manager=mgr)
        assert resp.initial_seed == 5489
        assert resp.seed != 5489

    def test_state_reports_twists(self):
        mgr = _manager()
        _draw(mgr, "raw", 313)
        state = get_state(manager=mgr)
        assert state.twists == 2
        assert state.cursor == 1
        assert state.draws_served == 313

    def test_status_is_one_consistent_read(self):
        mgr = _manager()
        _draw(mgr, "raw", 313)
        assert mgr.status() == (1, 2, 5489, 313)
        state = get_state(manager=mgr)
        assert (state.cursor, state.twists, state.initial_seed, state.draws_served) == mgr.status()

    def test_snapshot_schema_rejects_negative_counters(self):
        with pytest.raises(ValidationError):
            SnapshotSchema(words=[0] * 312, cursor=0, twists=-1, initial_seed=0)
        with pytest.raises(ValidationError):
            SnapshotSchema(words=[0] * 312, cursor=0, twists=0, initial_seed=-7)

    def test_unvalidated_bad_snapshot_is_422_and_state_kept(self):
        mgr = _manager()
        _draw(mgr, "raw", 10)
        before = get_state(manager=mgr)
        body = SnapshotSchema.model_construct(words=[0] * 312, cursor=0, twists=-1, initial_seed=-7)
        with pytest.raises(HTTPException) as info:
            put_snapshot(body, manager=mgr)
        assert info.value.status_code == 422
        assert get_state(manager=mgr) == before
        assert _draw(mgr, "raw").cursor == 11

    def test_snapshot_round_trip(self):
        mgr = _manager()
        _draw(mgr, "raw", 10)
        snap = get_snapshot(manager=mgr)
        expected = _draw(mgr, "raw", 5).values
        put_snapshot(SnapshotSchema(**snap.model_dump()), manager=mgr)
        assert _draw(mgr, "raw", 5).values == expected

    def test_reseed(self):
        mgr = _manager()
        _draw(mgr, "raw", 3)
        resp = reseed(seed=5489, manager=mgr)
        assert resp.initial_seed == 5489
        assert _draw(mgr, "raw").values == [14514284786278117030]

    def test_reseed_rejects_out_of_range(self):
        with pytest.raises(HTTPException) as info:
            reseed(seed=1 << 64, manager=_manager())
        assert info.value.status_code == 422

    def test_reseed_without_seed_uses_provider(self):
        mgr = GeneratorManager(EngineConfig(seed=1), seed_provider=lambda: 55)
        assert reseed(seed=None, manager=mgr).initial_seed == 55

    def test_config(self):
        resp = get_config(manager=_manager(seed=9, max_batch=50))
        assert resp.seed == 9
        assert resp.max_batch == 50


class TestAppFactory:

    def test_routes_registered(self):
        app = create_app(EngineConfig(seed=1))
        assert isinstance(app, FastAPI)
        paths = app.openapi()["paths"]
        for path in (
            "/api/v1/draw/{distribution}",
            "/api/v1/seed",
            "/api/v1/state",
            "/api/v1/snapshot",
            "/api/v1/control/reseed",
            "/api/v1/config",
        ):
            assert path in paths

    def test_dependency_requires_startup(self):
        dependencies.set_generator_manager(None)
        with pytest.raises(RuntimeError):
            dependencies.get_generator_manager()

    def test_dependency_returns_manager(self):
        mgr = _manager()
        dependencies.set_generator_manager(mgr)
        try:
            assert dependencies.get_generator_manager() is mgr
        finally:
            dependencies.set_generator_manager(None)

    def test_distribution_names_are_routable(self):
        mgr = _manager()
        for dist in Distribution:
            kwargs = {}
            if dist in (Distribution.RANDINT, Distribution.RANDFLOAT, Distribution.RANDDOUBLE):
                kwargs["bound"] = 4.0
            if dist == Distribution.RANDRANGE:
                kwargs.update(low=0, high=4)
            assert len(_draw(mgr, dist.name.lower(), 2, **kwargs).values) == 2
