"""Tests for RemotePaginate."""

import msgspec
import pytest

from adtkit import (
    Loaded,
    LoadingMore,
    NoMore,
    Ok,
    PageError,
    Paginate,
    Success,
    append_paginate,
    create_paginate,
    decode,
    loaded,
    loading_more,
    map_paginate_meta,
    map_paginate_status,
    map_paginate_value,
    no_more,
    page_error,
    prepend_paginate,
    to_json,
)


class TestCreate:
    """Tests for create_paginate()."""

    def test_create_is_success(self):
        remote = create_paginate([1, 2], loaded())
        assert remote == Success(Paginate((1, 2), loaded()))
        assert remote.data.meta is msgspec.UNSET

    def test_create_with_meta(self, sample_page):
        assert sample_page.data.meta == {'cursor': 'abc'}
        assert sample_page.data.value == (1, 2, 3)

    def test_create_copies_value(self):
        items = [1]
        remote = create_paginate(items, loaded())
        items.append(2)
        assert remote.data.value == (1,)

    def test_default_statuses(self):
        assert loaded() != loading_more()
        assert page_error('e') == PageError('e')
        assert no_more() == NoMore()
        assert loading_more() == LoadingMore()

    def test_custom_status_is_opaque(self):
        """Any status type is accepted and carried as is."""
        remote = create_paginate([], 'idle', meta=None)
        assert remote.data.status == 'idle'


class TestPipeline:
    def test_create_append_map(self):
        remote = create_paginate([1, 2], loaded())
        remote = append_paginate(remote, [3])
        remote = map_paginate_value(remote, lambda x: x * 2)
        assert remote == Success(Paginate(value=(2, 4, 6), status=loaded(), meta=msgspec.UNSET))


class TestSuccessOperations:
    """Tests for each operation on a Success value."""

    def test_map_value_keeps_status_and_meta(self, sample_page):
        mapped = map_paginate_value(sample_page, str)
        assert mapped.data.value == ('1', '2', '3')
        assert mapped.data.status is sample_page.data.status
        assert mapped.data.meta is sample_page.data.meta

    def test_append(self, sample_page):
        assert append_paginate(sample_page, [4, 5]).data.value == (1, 2, 3, 4, 5)

    def test_prepend(self, sample_page):
        assert prepend_paginate(sample_page, [-1, 0]).data.value == (-1, 0, 1, 2, 3)

    def test_append_keeps_status_and_meta(self, sample_page):
        appended = append_paginate(sample_page, [4])
        assert appended.data.status == loaded()
        assert appended.data.meta == {'cursor': 'abc'}

    def test_input_untouched(self, sample_page):
        append_paginate(sample_page, [4])
        prepend_paginate(sample_page, [0])
        map_paginate_value(sample_page, str)
        assert sample_page.data.value == (1, 2, 3)

    def test_map_status(self, sample_page):
        mapped = map_paginate_status(sample_page, lambda _: no_more())
        assert mapped.data.status == no_more()
        assert mapped.data.value is sample_page.data.value

    def test_load_more_error_lives_in_status(self, sample_page):
        """A failed follow-up page keeps the outer state as Success."""
        errored = map_paginate_status(sample_page, lambda _: page_error('timeout'))
        assert isinstance(errored, Success)
        assert errored.data.status == PageError('timeout')

    def test_map_meta(self, sample_page):
        mapped = map_paginate_meta(sample_page, lambda m: m['cursor'])
        assert mapped.data.meta == 'abc'

    def test_map_meta_skips_absent_meta(self):
        remote = create_paginate([1], loaded())

        def explode(_):
            raise AssertionError('should not be called')

        assert map_paginate_meta(remote, explode) is remote

    @pytest.mark.parametrize('meta', [0, '', None, False, []])
    def test_map_meta_applies_to_falsy_meta(self, meta):
        remote = create_paginate([1], loaded(), meta=meta)
        assert map_paginate_meta(remote, lambda m: ('seen', m)).data.meta == ('seen', meta)


class TestUnsettledIdentity:
    """Every operation returns its input unchanged unless the state is Success."""

    def test_map_value(self, unsettled_remote):
        assert map_paginate_value(unsettled_remote, str) is unsettled_remote

    def test_map_meta(self, unsettled_remote):
        assert map_paginate_meta(unsettled_remote, str) is unsettled_remote

    def test_map_status(self, unsettled_remote):
        assert map_paginate_status(unsettled_remote, str) is unsettled_remote

    def test_append(self, unsettled_remote):
        assert append_paginate(unsettled_remote, [1]) is unsettled_remote

    def test_prepend(self, unsettled_remote):
        assert prepend_paginate(unsettled_remote, [1]) is unsettled_remote


class TestJson:
    def test_absent_meta_is_omitted(self):
        assert to_json(create_paginate([1], loaded())) == (
            '{"_t":"Success","data":{"value":[1],"status":{"_t":"Loaded"}}}'
        )

    def test_round_trip_with_default_status(self, sample_page):
        status = Loaded | LoadingMore | PageError[str] | NoMore
        decoded = decode(to_json(sample_page), Success[Paginate[str, int, dict[str, str], status]])
        assert decoded == Ok(sample_page)
