"""Tests for the list view controller."""

import pytest

from caseboard.domain.filters import ALL, FilterState, PageState, SortState
from caseboard.domain.listing import (
    ListViewController,
    ListViewSpec,
    clamp_page,
    compute_view,
    resolve_field,
)


def _all_pages(spec, records, filter_state, sort_state=None, page_size=6):
    first = compute_view(spec, records, filter_state, sort_state, PageState(1, page_size))
    pages = [first]
    for p in range(2, first.total_pages + 1):
        pages.append(compute_view(spec, records, filter_state, sort_state, PageState(p, page_size)))
    return pages


class TestResolveField:
    """Field lookup on dicts, objects and dotted paths."""

    def test_dict_key(self):
        assert resolve_field({"title": "A"}, "title") == "A"

    def test_dotted_path(self):
        assert resolve_field({"client": {"name": "Alice"}}, "client.name") == "Alice"

    def test_missing_reads_as_none(self):
        assert resolve_field({"client": None}, "client.name") is None
        assert resolve_field({}, "title") is None

    def test_attribute_and_callable(self, sample_cases):
        case = sample_cases[0]
        assert resolve_field(case, "client_name") == "Alice Smith"
        assert resolve_field(case, lambda r: r.progress * 2) == 80


class TestComputeView:
    """Filtering, sorting and paging as one pure computation."""

    def test_status_filter_paging_example(self, plain_spec, thirteen_records):
        flt = FilterState(values={"status": "active"})
        page1 = compute_view(plain_spec, thirteen_records, flt, SortState(), PageState(1, 6))
        page2 = compute_view(plain_spec, thirteen_records, flt, SortState(), PageState(2, 6))

        assert len(page1.page_items) == 6
        assert all(r["status"] == "active" for r in page1.page_items)
        assert len(page2.page_items) == 1
        assert page2.page_items[0]["status"] == "active"
        assert page1.total_pages == page2.total_pages == 2
        assert page1.has_next is True
        assert page2.has_next is False
        assert page2.has_prev is True

    def test_empty_records(self, plain_spec):
        view = compute_view(
            plain_spec, [], FilterState(search="x", values={"status": "active"}), SortState("name"), PageState(3, 6)
        )
        assert view.page_items == []
        assert view.total_pages == 1
        assert view.total_items == 0
        assert view.has_next is False
        assert view.has_prev is False

    def test_none_inputs_degrade_to_defaults(self, plain_spec):
        view = compute_view(plain_spec, None, None, None, None)
        assert view.page_items == []
        assert view.page == 1
        assert view.page_size == plain_spec.page_size

    def test_search_is_case_insensitive_substring(self, plain_spec):
        records = [
            {"title": "Smith v. Jones"},
            {"title": "Doe Estate"},
            {"title": "smith Contract"},
        ]
        view = compute_view(plain_spec, records, FilterState(search="smith"))
        assert [r["title"] for r in view.page_items] == ["Smith v. Jones", "smith Contract"]

    def test_search_matches_any_searched_field(self, plain_spec):
        records = [
            {"title": "Lease dispute", "client": {"name": "Maria Smith"}},
            {"title": "Probate", "client": {"name": "Ken Lee"}},
        ]
        view = compute_view(plain_spec, records, FilterState(search="  SMITH "))
        assert [r["title"] for r in view.page_items] == ["Lease dispute"]

    def test_search_ignores_unsearched_fields(self, plain_spec):
        records = [{"title": "Lease", "status": "smith"}]
        assert compute_view(plain_spec, records, FilterState(search="smith")).total_items == 0

    def test_filters_are_conjunctive(self, plain_spec):
        records = [
            {"title": "a", "status": "active", "priority": "high"},
            {"title": "b", "status": "active", "priority": "low"},
            {"title": "c", "status": "closed", "priority": "high"},
        ]
        view = compute_view(
            plain_spec, records, FilterState(values={"status": "active", "priority": "high"})
        )
        assert [r["title"] for r in view.page_items] == ["a"]

    def test_all_and_blank_bypass_filter(self, plain_spec, thirteen_records):
        for value in (ALL, "", None):
            view = compute_view(plain_spec, thirteen_records, FilterState(values={"status": value}))
            assert view.total_items == 13

    def test_undeclared_filter_is_ignored(self, plain_spec, thirteen_records):
        view = compute_view(plain_spec, thirteen_records, FilterState(values={"colour": "red"}))
        assert view.total_items == 13

    def test_unknown_sort_key_keeps_input_order(self, plain_spec, thirteen_records):
        view = compute_view(plain_spec, thirteen_records, None, SortState("nope"), PageState(1, 100))
        assert [r["id"] for r in view.page_items] == list(range(13))

    def test_sort_by_name(self, plain_spec):
        records = [{"title": "beta"}, {"title": "Alpha"}, {"title": "gamma"}]
        view = compute_view(plain_spec, records, None, SortState("name"))
        assert [r["title"] for r in view.page_items] == ["Alpha", "beta", "gamma"]

    def test_sort_is_stable_for_equal_keys(self, plain_spec):
        records = [
            {"title": "first", "priority": "high"},
            {"title": "low one", "priority": "low"},
            {"title": "second", "priority": "high"},
            {"title": "third", "priority": "high"},
        ]
        view = compute_view(plain_spec, records, None, SortState("priority"))
        assert [r["title"] for r in view.page_items] == ["first", "second", "third", "low one"]

    def test_missing_sort_values_go_last_in_input_order(self, plain_spec):
        records = [
            {"title": "no date 1"},
            {"title": "old", "created_at": "2023-01-01T00:00:00"},
            {"title": "no date 2", "created_at": "not a date"},
            {"title": "new", "created_at": "2024-01-01T00:00:00Z"},
        ]
        view = compute_view(plain_spec, records, None, SortState("recent"))
        assert [r["title"] for r in view.page_items] == ["new", "old", "no date 1", "no date 2"]

    def test_out_of_range_page_is_clamped(self, plain_spec, thirteen_records):
        view = compute_view(plain_spec, thirteen_records, None, None, PageState(99, 6))
        assert view.page == 3
        assert len(view.page_items) == 1

        view = compute_view(plain_spec, thirteen_records, None, None, PageState(-4, 6))
        assert view.page == 1

    def test_invalid_page_size_falls_back_to_spec(self, plain_spec, thirteen_records):
        view = compute_view(plain_spec, thirteen_records, None, None, PageState(1, 0))
        assert view.page_size == plain_spec.page_size
        assert len(view.page_items) == 6

    def test_is_idempotent(self, plain_spec, thirteen_records):
        args = (
            plain_spec,
            thirteen_records,
            FilterState(search="matter", values={"status": "pending"}),
            SortState("name"),
            PageState(1, 3),
        )
        assert compute_view(*args) == compute_view(*args)

    def test_does_not_mutate_records(self, plain_spec, thirteen_records):
        snapshot = [dict(r) for r in thirteen_records]
        compute_view(plain_spec, thirteen_records, None, SortState("name"), PageState(2, 4))
        assert thirteen_records == snapshot

    @pytest.mark.parametrize("page_size", [1, 4, 6, 13, 20])
    def test_pages_partition_the_filtered_set(self, plain_spec, thirteen_records, page_size):
        flt = FilterState(values={"status": "pending"})
        pages = _all_pages(plain_spec, thirteen_records, flt, SortState("name"), page_size)
        items = [r for view in pages for r in view.page_items]

        assert len(items) == pages[0].total_items == 4
        assert len({r["id"] for r in items}) == 4
        assert all(r["status"] == "pending" for r in items)

    def test_first_and_last_index(self, plain_spec, thirteen_records):
        view = compute_view(plain_spec, thirteen_records, None, None, PageState(3, 6))
        assert (view.first_index, view.last_index) == (13, 13)
        empty = compute_view(plain_spec, [], None, None, None)
        assert (empty.first_index, empty.last_index) == (0, 0)


class TestClampPage:
    """Page clamping helper."""

    def test_clamps_into_range(self):
        assert clamp_page(0, 3) == 1
        assert clamp_page(5, 3) == 3
        assert clamp_page(2, 3) == 2

    def test_zero_pages_still_allows_page_one(self):
        assert clamp_page(4, 0) == 1

    def test_garbage_reads_as_first_page(self):
        assert clamp_page(None, 3) == 1
        assert clamp_page("abc", 3) == 1
        assert clamp_page("2", 3) == 2


class TestListViewController:
    """Stateful controller wired to the rendering layer."""

    def test_defaults_from_spec(self, plain_spec):
        controller = ListViewController(plain_spec)
        assert controller.filter_state.values == {"status": ALL, "priority": ALL}
        assert controller.filter_state.search == ""
        assert controller.sort_state.key == plain_spec.default_sort
        assert controller.page_state == PageState(1, plain_spec.page_size)
        assert controller.view.total_pages == 1

    @pytest.mark.parametrize("requested", [-10, 0, 1, 2, 3, 4, 100])
    def test_go_to_page_stays_in_bounds(self, plain_spec, thirteen_records, requested):
        controller = ListViewController(plain_spec, thirteen_records)
        page = controller.go_to_page(requested)
        assert 1 <= page <= controller.view.total_pages
        assert controller.view.page == page

    def test_next_and_prev(self, plain_spec, thirteen_records):
        controller = ListViewController(plain_spec, thirteen_records)
        assert controller.next_page() == 2
        assert controller.next_page() == 3
        assert controller.next_page() == 3
        assert controller.prev_page() == 2
        controller.go_to_page(1)
        assert controller.prev_page() == 1

    def test_filter_change_resets_page(self, plain_spec, thirteen_records):
        controller = ListViewController(plain_spec, thirteen_records)
        controller.go_to_page(3)
        controller.set_filter("status", "active")
        assert controller.page_state.page == 1
        assert controller.view.total_items == 7

    def test_search_and_sort_change_reset_page(self, plain_spec, thirteen_records):
        controller = ListViewController(plain_spec, thirteen_records)
        controller.go_to_page(2)
        controller.set_sort("name")
        assert controller.page_state.page == 1

        controller.go_to_page(2)
        controller.set_search("matter")
        assert controller.page_state.page == 1

    def test_unknown_filter_raises(self, plain_spec):
        controller = ListViewController(plain_spec)
        with pytest.raises(ValueError):
            controller.set_filter("colour", "red")

    def test_unknown_sort_falls_back_to_input_order(self, plain_spec, thirteen_records):
        controller = ListViewController(plain_spec, thirteen_records)
        controller.set_sort("bogus")
        assert [r["id"] for r in controller.view.page_items] == [0, 1, 2, 3, 4, 5]

    def test_set_records_keeps_page_but_clamps(self, plain_spec, thirteen_records):
        controller = ListViewController(plain_spec, thirteen_records)
        controller.go_to_page(2)
        controller.set_records(thirteen_records + thirteen_records)
        assert controller.page_state.page == 2

        controller.go_to_page(5)
        controller.set_records(thirteen_records[:3])
        assert controller.page_state.page == 1

    def test_records_are_copied(self, plain_spec, thirteen_records):
        controller = ListViewController(plain_spec, thirteen_records)
        thirteen_records.clear()
        assert len(controller.records) == 13

    def test_restore_and_reset(self, plain_spec, thirteen_records):
        controller = ListViewController(plain_spec, thirteen_records)
        controller.go_to_page(2)
        controller.restore(FilterState(search="matter", values={"status": "closed", "colour": "x"}), SortState("name"))
        assert controller.page_state.page == 1
        assert controller.filter_state.values == {"status": "closed", "priority": ALL}
        assert controller.view.total_items == 2

        controller.reset()
        assert controller.filter_state.is_default()
        assert controller.view.total_items == 13

    def test_on_change_called_after_mutations(self, plain_spec, thirteen_records):
        calls = []
        controller = ListViewController(plain_spec, thirteen_records, on_change=lambda: calls.append(1))
        controller.set_search("x")
        controller.set_filter("status", "active")
        controller.set_sort("name")
        controller.go_to_page(2)
        controller.reset()
        assert len(calls) == 5

    def test_view_recomputed_on_every_access(self, plain_spec):
        records = [{"title": "a"}]
        controller = ListViewController(plain_spec, records)
        assert controller.view.total_items == 1
        controller.set_records(records + [{"title": "b"}])
        assert controller.view.total_items == 2

    def test_spec_without_filters_or_sorts(self, thirteen_records):
        controller = ListViewController(ListViewSpec(name="bare", page_size=5), thirteen_records)
        assert controller.view.total_pages == 3
        assert [r["id"] for r in controller.view.page_items] == [0, 1, 2, 3, 4]
