"""Unit tests for shaping allowed-entries rows into per-class records."""
from __future__ import annotations

from reverse_acl.adapters.sqlalchemy import shape_allowed_entries
from reverse_acl.kernel.security import ClassAccess


def _row(identifier: str | None, class_type: str, field_name: str | None) -> dict[str, str | None]:
    return {"object_identifier": identifier, "class_type": class_type, "field_name": field_name}


ROWS = [
    _row(None, "T", None),
    _row(None, "T", "name"),
    _row(None, "T", "email"),
    _row("1", "T", None),
    _row("2", "T", None),
    _row("1", "T", "surname"),
    _row("3", "U", "surname"),
]


class TestShapeAllowedEntries:
    def test_empty(self) -> None:
        assert shape_allowed_entries([]) == {}

    def test_four_way_discrimination(self) -> None:
        result = shape_allowed_entries(ROWS)

        assert result == {
            "T": ClassAccess(
                class_access=True,
                class_field_access={"name", "email"},
                object_access={"1", "2"},
                object_field_access={"1": {"surname"}},
            ),
            "U": ClassAccess(object_field_access={"3": {"surname"}}),
        }

    def test_order_independent(self) -> None:
        assert shape_allowed_entries(reversed(ROWS)) == shape_allowed_entries(ROWS)

    def test_duplicates_collapse(self) -> None:
        result = shape_allowed_entries(ROWS + ROWS)
        assert result == shape_allowed_entries(ROWS)

    def test_empty_strings_count_as_absent(self) -> None:
        result = shape_allowed_entries([_row("", "T", ""), _row("", "T", "f")])
        assert result == {"T": ClassAccess(class_access=True, class_field_access={"f"})}

    def test_non_string_identifiers_are_stringified(self) -> None:
        result = shape_allowed_entries([{"object_identifier": 10, "class_type": "T", "field_name": None}])
        assert result["T"].object_access == {"10"}

    def test_facets_stay_absent(self) -> None:
        result = shape_allowed_entries([_row("1", "T", None)])
        assert result["T"].to_dict() == {"object_access": ["1"]}
        assert result["T"].class_access is None
        assert result["T"].class_field_access is None
        assert result["T"].object_field_access is None
