"""
Unit tests for next-position helpers
"""

import pytest

from linkshelf.services.ordering import (
    get_next_collection_order_index,
    get_next_link_order_index,
)


@pytest.mark.unit
class TestCollectionOrderIndex:
    """Test get_next_collection_order_index"""

    def test_empty_scope_starts_at_zero(self, db_session, test_user):
        assert get_next_collection_order_index(db_session, test_user.id) == 0

    def test_appends_after_max(self, db_session, test_user, make_collection):
        """Gaps are not filled; the next index follows the maximum"""
        make_collection(test_user, order=0)
        make_collection(test_user, order=5)

        assert get_next_collection_order_index(db_session, test_user.id) == 6

    def test_scoped_per_user(self, db_session, test_user, other_user, make_collection):
        """Another user's collections do not shift this user's tail"""
        make_collection(other_user, order=9)

        assert get_next_collection_order_index(db_session, test_user.id) == 0


@pytest.mark.unit
class TestLinkOrderIndex:
    """Test get_next_link_order_index"""

    def test_empty_scope_starts_at_one(self, db_session, test_collection):
        assert get_next_link_order_index(db_session, test_collection.id) == 1

    def test_second_link_gets_two(self, db_session, test_collection, make_link):
        """First link takes the floor, the next one follows it"""
        first_order = get_next_link_order_index(db_session, test_collection.id)
        make_link(test_collection, order=first_order)

        assert get_next_link_order_index(db_session, test_collection.id) == 2

    def test_reordered_links_from_zero(self, db_session, test_collection, make_link):
        """After a reorder to 0..n-1 the tail is still max + 1"""
        make_link(test_collection, order=0)
        make_link(test_collection, order=1)

        assert get_next_link_order_index(db_session, test_collection.id) == 2

    def test_scoped_per_collection(self, db_session, test_user, test_collection, make_collection, make_link):
        elsewhere = make_collection(test_user, name="Elsewhere", order=1)
        make_link(elsewhere, order=7)

        assert get_next_link_order_index(db_session, test_collection.id) == 1
