"""Tests for QueryBuilder composition and its serialized form."""

from __future__ import annotations

from payload_query import (
    JoinBuilder,
    Operator,
    QueryBuilder,
    QueryStringEncoder,
    WhereBuilder,
)


def _segments(query_string: str) -> set[str]:
    return set(query_string.lstrip("?").split("&"))


# -- Scalar options ----------------------------------------------------------


def test_empty_builder_builds_empty_dict(query: QueryBuilder) -> None:
    assert query.build() == {}


def test_empty_builder_serializes_to_empty_string(
    query: QueryBuilder, encoder: QueryStringEncoder
) -> None:
    assert encoder.stringify(query.build()) == ""


def test_scalar_options(query: QueryBuilder) -> None:
    result = query.limit(10).page(2).depth(1).locale("en").fallback_locale("de").build()
    assert result == {
        "limit": 10,
        "page": 2,
        "depth": 1,
        "locale": "en",
        "fallback-locale": "de",
    }


def test_scalar_options_overwrite(query: QueryBuilder) -> None:
    assert query.limit(10).limit(20).page(1).page(3).build() == {"limit": 20, "page": 3}


def test_zero_values_are_kept(query: QueryBuilder) -> None:
    assert query.limit(0).depth(0).build() == {"limit": 0, "depth": 0}


def test_output_key_order(query: QueryBuilder) -> None:
    query.join(lambda j: j.limit("posts", 1))
    query.where("a", "equals", 1)
    query.populate(["author"]).select(["title"]).fallback_locale("de").locale("en")
    query.depth(2).sort("title").page(1).limit(5)
    assert list(query.build()) == [
        "limit",
        "page",
        "sort",
        "depth",
        "locale",
        "fallback-locale",
        "select",
        "populate",
        "where",
        "joins",
    ]


# -- Comma lists -------------------------------------------------------------


def test_sort_appends(query: QueryBuilder, encoder: QueryStringEncoder) -> None:
    query.sort("date").sort_by_descending("title")
    assert query.build() == {"sort": "date,-title"}
    assert encoder.stringify(query.build()) == "?sort=date,-title"


def test_sort_by_descending_keeps_existing_prefix(query: QueryBuilder) -> None:
    assert query.sort_by_descending("-title").build() == {"sort": "-title"}


def test_select_appends(query: QueryBuilder, encoder: QueryStringEncoder) -> None:
    query.select(["title", "author"])
    assert encoder.stringify(query.build()) == "?select=title,author"
    query.select(["date"])
    assert query.build() == {"select": "title,author,date"}


def test_populate_overwrites(query: QueryBuilder) -> None:
    assert query.populate(["a", "b"]).populate(["c"]).build() == {"populate": "c"}


# -- Filtering ---------------------------------------------------------------


def test_where_and_or_serialize(query: QueryBuilder, encoder: QueryStringEncoder) -> None:
    query.where("author", "equals", "Alice").or_(
        lambda g: g.where("title", "contains", "Deckbuilding").where(
            "title", "contains", "Gloomhaven"
        )
    )
    result = encoder.stringify(query.build())
    assert "where[author][equals]=Alice" in result
    assert (
        "where[or][0][title][contains]=Deckbuilding"
        "&where[or][1][title][contains]=Gloomhaven"
    ) in result


def test_and_group_on_root(query: QueryBuilder) -> None:
    query.and_(lambda g: g.where("a", Operator.EXISTS, True))
    assert query.build() == {"where": {"and": [{"a": {"exists": True}}]}}


def test_where_callbacks_receive_where_builder(query: QueryBuilder) -> None:
    received: list[object] = []
    query.or_(received.append)
    assert isinstance(received[0], WhereBuilder)


def test_list_values_use_index_brackets(
    query: QueryBuilder, encoder: QueryStringEncoder
) -> None:
    query.where("tags", Operator.IN, ["board", "card"])
    assert encoder.stringify(query.build()) == (
        "?where[tags][in][0]=board&where[tags][in][1]=card"
    )


# -- Joins -------------------------------------------------------------------


def test_join_serializes(query: QueryBuilder, encoder: QueryStringEncoder) -> None:
    query.join(
        lambda j: j.where("posts", "author", "equals", "Alice")
        .sort_by_descending("posts", "title")
        .limit("posts", 1)
    )
    assert _segments(encoder.stringify(query.build())) == {
        "joins[posts][where][author][equals]=Alice",
        "joins[posts][sort]=-title",
        "joins[posts][limit]=1",
    }


def test_join_matches_equivalent_literal(
    query: QueryBuilder, encoder: QueryStringEncoder
) -> None:
    query.join(
        lambda j: j.where("posts", "author", "equals", "Alice")
        .sort_by_descending("posts", "title")
        .limit("posts", 1)
    )
    expected = encoder.stringify(
        {
            "joins": {
                "posts": {
                    "limit": 1,
                    "sort": "-title",
                    "where": {"author": {"equals": "Alice"}},
                }
            }
        }
    )
    assert encoder.stringify(query.build()) == expected


def test_join_accumulates_across_calls(query: QueryBuilder) -> None:
    query.join(lambda j: j.limit("posts", 2))
    query.join(lambda j: j.sort_by_descending("posts", "title"))
    assert query.build() == {"joins": {"posts": {"limit": 2, "sort": "-title"}}}


def test_join_callback_receives_same_builder(query: QueryBuilder) -> None:
    received: list[JoinBuilder] = []
    query.join(received.append).join(received.append)
    assert received[0] is received[1]


def test_disabled_joins_serialize_false(
    query: QueryBuilder, encoder: QueryStringEncoder
) -> None:
    query.join(lambda j: j.limit("posts", 1).disable())
    assert query.build() == {"joins": False}
    assert encoder.stringify(query.build()) == "?joins=false"


def test_disable_before_configuration(query: QueryBuilder) -> None:
    query.join(lambda j: j.disable()).join(lambda j: j.limit("posts", 1))
    assert query.build() == {"joins": False}


def test_ignored_join_calls_leave_no_joins_key(query: QueryBuilder) -> None:
    query.join(lambda j: j.sort("posts", ""))
    assert "joins" not in query.build()


# -- Full query --------------------------------------------------------------


def test_full_query_string(query: QueryBuilder, encoder: QueryStringEncoder) -> None:
    query.limit(10).page(2).sort("date").select(["title"]).fallback_locale("en")
    query.where("status", Operator.EQUALS, "published")
    query.join(lambda j: j.count("comments"))
    assert encoder.stringify(query.build()) == (
        "?limit=10&page=2&sort=date&fallback-locale=en&select=title"
        "&where[status][equals]=published&joins[comments][count]=true"
    )


def test_build_is_repeatable(query: QueryBuilder) -> None:
    query.limit(1).sort("a").where("a", "equals", 1).join(lambda j: j.limit("p", 1))
    assert query.build() == query.build()


def test_mutating_build_result_does_not_affect_builder(query: QueryBuilder) -> None:
    query.where("a", "equals", 1).join(lambda j: j.where("posts", "a", "equals", 1))
    result = query.build()
    result["where"]["a"]["equals"] = 99
    result["joins"]["posts"]["where"]["a"]["equals"] = 99
    rebuilt = query.build()
    assert rebuilt["where"]["a"]["equals"] == 1
    assert rebuilt["joins"]["posts"]["where"]["a"]["equals"] == 1


def test_absent_join_values_leave_no_joins_key(query: QueryBuilder) -> None:
    query.join(lambda j: j.limit("posts", None))  # type: ignore[arg-type]
    assert "joins" not in query.build()


def test_chaining_returns_same_instance(query: QueryBuilder) -> None:
    assert query.limit(1) is query
    assert query.where("a", "equals", 1) is query
    assert query.join(lambda j: None) is query
