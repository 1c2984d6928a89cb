"""Tests for RemoteData states and transformations."""

import pytest
from hypothesis import given

from adtkit import (
    Err,
    Failure,
    Just,
    Loading,
    NotAsked,
    Nothing,
    Ok,
    Success,
    decode_remote_data,
    failure,
    from_failure,
    from_success,
    loading,
    map_remote_data,
    map_remote_data_error,
    not_asked,
    success,
    to_json,
)
from adtkit.remote import from_result
from tests.strategies import remote_data


class TestConstructors:
    """Tests for the four state constructors."""

    def test_payloadless_states_are_singletons(self):
        assert not_asked() is not_asked()
        assert loading() is loading()
        assert NotAsked() == not_asked()

    def test_payload_states(self):
        assert failure('e') == Failure('e')
        assert success(1) == Success(1)

    def test_states_are_mutually_exclusive(self):
        states = [not_asked(), loading(), failure(1), success(1)]
        for i, a in enumerate(states):
            for j, b in enumerate(states):
                assert (a == b) is (i == j)

    @pytest.mark.parametrize(
        ('state', 'flags'),
        [
            (not_asked(), (True, False, False, False)),
            (loading(), (False, True, False, False)),
            (failure('e'), (False, False, True, False)),
            (success(1), (False, False, False, True)),
        ],
    )
    def test_predicates(self, state, flags):
        assert (state.is_not_asked(), state.is_loading(), state.is_failure(), state.is_success()) == flags

    def test_failure_is_frozen(self):
        with pytest.raises(AttributeError):
            failure('e').error = 'x'  # type: ignore[misc]


class TestMapping:
    """Tests for map_remote_data and map_remote_data_error."""

    def test_map_success(self):
        assert map_remote_data(success(2), lambda x: x * 10) == success(20)

    @pytest.mark.parametrize('state', [not_asked(), loading(), failure('e')])
    def test_map_other_states_identity(self, state):
        assert map_remote_data(state, lambda x: x * 10) is state

    def test_map_error_failure(self):
        assert map_remote_data_error(failure('e'), str.upper) == failure('E')

    @pytest.mark.parametrize('state', [not_asked(), loading(), success(1)])
    def test_map_error_other_states_identity(self, state):
        assert map_remote_data_error(state, str.upper) is state

    @given(remote_data)
    def test_mapping_preserves_state(self, rd):
        assert type(map_remote_data(rd, lambda x: x + 1)) is type(rd)
        assert type(map_remote_data_error(rd, lambda e: e + '!')) is type(rd)


class TestExtraction:
    """Tests for from_failure and from_success."""

    def test_from_failure(self):
        assert from_failure(failure('e')) == Just('e')
        assert from_failure(success(1)) is Nothing
        assert from_failure(loading()) is Nothing

    def test_from_success(self):
        assert from_success(success(1)) == Just(1)
        assert from_success(failure('e')) is Nothing
        assert from_success(not_asked()) is Nothing

    def test_from_success_keeps_none_payload(self):
        assert from_success(success(None)) == Just(None)


class TestFromResult:
    def test_lifts_ok_and_err(self):
        assert from_result(Ok(1)) == success(1)
        assert from_result(Err('e')) == failure('e')


class TestDecode:
    """Tests for decode_remote_data()."""

    @given(remote_data)
    def test_round_trip(self, rd):
        assert decode_remote_data(to_json(rd), str, int) == Ok(rd)

    def test_decode_typed_payload(self):
        assert decode_remote_data('{"_t": "Success", "data": 3}', data_type=int) == Ok(success(3))
        assert decode_remote_data('{"_t": "Loading"}') == Ok(Loading())

    def test_decode_rejects_unknown_tag(self):
        assert isinstance(decode_remote_data('{"_t": "Done"}'), Err)

    def test_decode_rejects_wrong_payload_type(self):
        assert isinstance(decode_remote_data('{"_t": "Success", "data": "x"}', data_type=int), Err)
