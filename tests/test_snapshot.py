"""Tests for GeneratorSnapshot — capture, restore and serialization."""

import json

import pytest

from mt64.core.errors import InvalidArgument
from mt64.core.snapshot import GeneratorSnapshot
from mt64.core.state import STATE_SIZE, GeneratorState
from mt64.systems.mersenne import MersenneTwister64


def _advanced(seed: int, words: int) -> MersenneTwister64:
    mt = MersenneTwister64(seed)
    for _ in range(words):
        mt.extract_word()
    return mt


class TestSnapshotRestore:

    def test_restore_resumes_sequence(self):
        mt = _advanced(77, 200)
        snap = mt.snapshot()
        expected = [mt.extract_word() for _ in range(500)]
        mt.restore(snap)
        assert [mt.extract_word() for _ in range(500)] == expected

    def test_restore_into_other_engine(self):
        source = _advanced(77, 311)
        target = MersenneTwister64(1)
        target.restore(source.snapshot())
        assert target.initial_seed == 77
        assert target.cursor == source.cursor
        assert target.twist_count == source.twist_count
        assert target.randint(1000) == source.randint(1000)

    def test_snapshot_is_independent_of_engine(self):
        mt = _advanced(5, 10)
        snap = mt.snapshot()
        for _ in range(400):
            mt.extract_word()
        assert snap.cursor == 10
        assert snap.twists == 1

    def test_snapshot_is_frozen(self):
        snap = MersenneTwister64(1).snapshot()
        with pytest.raises(Exception):
            snap.cursor = 0  # type: ignore

    def test_state_exhausted_tracks_cursor(self):
        state = GeneratorState()
        assert state.exhausted
        state.cursor = 0
        assert not state.exhausted
        state.cursor = 311
        assert not state.exhausted
        state.cursor = 312
        assert state.exhausted


class TestSnapshotSerialization:

    def test_dict_round_trip_through_json(self):
        mt = _advanced(2, 50)
        payload = json.loads(json.dumps(mt.snapshot().to_dict()))
        restored = MersenneTwister64(0)
        restored.restore(GeneratorSnapshot.from_dict(payload))
        assert restored.extract_word() == mt.extract_word()

    def test_wrong_length_rejected(self):
        data = MersenneTwister64(1).snapshot().to_dict()
        data["words"] = data["words"][:-1]
        with pytest.raises(InvalidArgument):
            GeneratorSnapshot.from_dict(data)

    def test_bad_cursor_rejected(self):
        data = MersenneTwister64(1).snapshot().to_dict()
        data["cursor"] = STATE_SIZE + 1
        with pytest.raises(InvalidArgument):
            GeneratorSnapshot.from_dict(data)

    def test_oversized_word_rejected(self):
        data = MersenneTwister64(1).snapshot().to_dict()
        data["words"][3] = 1 << 64
        with pytest.raises(InvalidArgument):
            GeneratorSnapshot.from_dict(data)

    def test_missing_key_rejected(self):
        data = MersenneTwister64(1).snapshot().to_dict()
        del data["initial_seed"]
        with pytest.raises(InvalidArgument):
            GeneratorSnapshot.from_dict(data)

    def test_invalid_snapshot_leaves_engine_untouched(self):
        mt = _advanced(3, 20)
        before = mt.snapshot()
        bad = GeneratorSnapshot(words=(0,) * 5, cursor=0, twists=0, initial_seed=0)
        with pytest.raises(InvalidArgument):
            mt.restore(bad)
        assert mt.snapshot() == before

    def test_negative_twist_count_rejected(self):
        data = MersenneTwister64(1).snapshot().to_dict()
        data["twists"] = -1
        with pytest.raises(InvalidArgument):
            GeneratorSnapshot.from_dict(data)

    @pytest.mark.parametrize("initial_seed", [-7, 1 << 64])
    def test_initial_seed_outside_uint64_rejected(self, initial_seed):
        data = MersenneTwister64(1).snapshot().to_dict()
        data["initial_seed"] = initial_seed
        with pytest.raises(InvalidArgument):
            GeneratorSnapshot.from_dict(data)

    def test_bad_counters_leave_engine_untouched(self):
        mt = _advanced(3, 20)
        before = mt.snapshot()
        bad = GeneratorSnapshot(words=(0,) * STATE_SIZE, cursor=0, twists=-1, initial_seed=-7)
        with pytest.raises(InvalidArgument):
            mt.restore(bad)
        assert mt.snapshot() == before
        assert mt.twist_count == 1
        assert mt.initial_seed == 3
