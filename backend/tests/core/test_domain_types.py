"""Domain Types — verifies resource kinds, write outcomes and the id wrapper.

Tests:
    - ResourceKind values double as URL segments
    - ResourceKind.label is the singular display name used in 404 messages
    - WriteOutcome has exactly three members
"""

from blog_api.core.domain_types import EntityId, ResourceKind, WriteOutcome


def test_entity_id_wraps_int():
    assert EntityId(7) == 7


def test_resource_kind_values_are_url_segments():
    assert ResourceKind.USERS.value == "users"
    assert ResourceKind.BLOGS.value == "blogs"


def test_resource_kind_label_is_singular():
    assert ResourceKind.USERS.label == "User"
    assert ResourceKind.BLOGS.label == "Blog"


def test_write_outcome_has_three_members():
    assert set(WriteOutcome) == {
        WriteOutcome.OK, WriteOutcome.NOT_FOUND, WriteOutcome.CONFLICT,
    }
