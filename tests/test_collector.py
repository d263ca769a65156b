from __future__ import annotations

import logging

import pytest

from viewbinding.collector import collect_bindings
from viewbinding.errors import ValidationError
from viewbinding.validation import find_unbound_elements, validate_bindings


def test_sample_round_yields_one_record(sample_round) -> None:
    records = collect_bindings(sample_round)

    assert len(records) == 1
    record = records[0]
    assert record.owner.qualified_name == "com.example.app.Sample"
    assert record.layout_id == 100
    assert [(f.name, f.type_name, f.view_id) for f in record.view_fields] == [("title", "TextView", 200)]
    assert [(h.method_name, h.view_ids) for h in record.click_handlers] == [("onSave", (300, 301))]
    assert record.long_click_handlers == ()


def test_records_follow_owner_discovery_order(package, make_class, make_round) -> None:
    second = make_class("Second", package, layout=2)
    first = make_class("First", package, layout=1)

    records = collect_bindings(make_round(second, first))

    assert [r.owner.simple_name for r in records] == ["Second", "First"]


def test_members_are_joined_by_enclosing_class(package, make_class, make_field, make_method, make_round) -> None:
    main = make_class("Main", package, layout=1)
    detail = make_class("Detail", package, layout=2)
    round_env = make_round(
        main,
        detail,
        make_field("a", detail, "Button", view_id=10),
        make_field("b", main, "TextView", view_id=11),
        make_method("onA", main, long_click=(12,)),
        make_field("c", main, "ImageView", view_id=13),
        make_method("onB", detail, click=(14, 15)),
    )

    main_record, detail_record = collect_bindings(round_env)

    assert [f.name for f in main_record.view_fields] == ["b", "c"]
    assert [h.method_name for h in main_record.long_click_handlers] == ["onA"]
    assert main_record.click_handlers == ()
    assert [f.name for f in detail_record.view_fields] == ["a"]
    assert [h.view_ids for h in detail_record.click_handlers] == [(14, 15)]


def test_method_with_both_markers_lands_in_both_collections(package, make_class, make_method, make_round) -> None:
    main = make_class("Main", package, layout=1)

    record = collect_bindings(make_round(main, make_method("onTouch", main, click=(1,), long_click=(1, 2))))[0]

    assert [h.view_ids for h in record.click_handlers] == [(1,)]
    assert [h.view_ids for h in record.long_click_handlers] == [(1, 2)]


def test_duplicate_ids_on_one_method_are_kept(package, make_class, make_method, make_round) -> None:
    main = make_class("Main", package, layout=1)

    record = collect_bindings(make_round(main, make_method("onTap", main, click=(5, 5))))[0]

    assert len(record.click_handlers) == 1
    assert record.click_handlers[0].view_ids == (5, 5)


def test_class_without_other_markers_yields_empty_record(package, make_class, make_round) -> None:
    record = collect_bindings(make_round(make_class("Splash", package, layout=9)))[0]

    assert record.is_empty
    assert record.layout_id == 9


def test_members_of_unbound_class_are_dropped(
    package, make_class, make_field, make_method, make_round, caplog
) -> None:
    helper = make_class("Helper", package)
    round_env = make_round(
        helper,
        make_field("orphan", helper, "Button", view_id=1),
        make_method("onOrphan", helper, click=(2,)),
    )

    with caplog.at_level(logging.DEBUG, logger="viewbinding.collector"):
        records = collect_bindings(round_env)

    assert records == []
    assert "Dropping @BindViewID on com.example.app.Helper.orphan" in caplog.text


def test_nested_class_members_bind_to_their_immediate_owner(
    package, make_class, make_field, make_round
) -> None:
    outer = make_class("Outer", package, layout=1)
    inner = make_class("Inner", outer)
    round_env = make_round(outer, inner, make_field("hidden", inner, "View", view_id=3))

    records = collect_bindings(round_env)

    assert [r.owner.simple_name for r in records] == ["Outer"]
    assert records[0].view_fields == ()


def test_collection_is_deterministic(sample_round) -> None:
    assert collect_bindings(sample_round) == collect_bindings(sample_round)


def test_find_unbound_elements(package, make_class, make_field, make_method, make_round) -> None:
    main = make_class("Main", package, layout=1)
    helper = make_class("Helper", package)
    round_env = make_round(
        main,
        helper,
        make_field("bound", main, "View", view_id=1),
        make_field("orphan", helper, "View", view_id=2),
        make_method("onOrphan", helper, long_click=(3,)),
    )

    unbound = find_unbound_elements(round_env)

    assert [(u.element.simple_name, u.marker.value) for u in unbound] == [
        ("orphan", "BindViewID"),
        ("onOrphan", "BindOnLongClick"),
    ]
    with pytest.raises(ValidationError, match="Helper.orphan: @BindViewID on class without @BindContentView"):
        validate_bindings(round_env)


def test_validate_bindings_accepts_clean_round(sample_round) -> None:
    validate_bindings(sample_round)
