"""Tests for the user -> posts association and the delegated open-posts view."""

import pytest

from app.core.errors import CapabilityMissing
from app.modules.posts.models.post import Post
from app.modules.user_management.models.user import User
from app.modules.user_management.services.user import open_posts_of, posts_of


def _ids(query):
    return {p.id for p in query}


class TestPostsOf:
    def test_returns_every_post_with_matching_user_id(self, db, make_user, make_post):
        user = make_user()
        first = make_post(user)
        second = make_post(user, status="closed")

        assert _ids(posts_of(db, user)) == {first.id, second.id}

    def test_excludes_posts_of_other_users(self, db, make_user, make_post):
        alice = make_user("alice")
        bob = make_user("bob")
        make_post(bob)
        mine = make_post(alice)

        assert _ids(posts_of(db, alice)) == {mine.id}

    def test_user_without_posts_gets_empty_result(self, db, make_user):
        user = make_user()
        assert posts_of(db, user).all() == []

    def test_transient_user_gets_empty_result(self, db, make_user, make_post):
        make_post(make_user())
        transient = User(username="ghost", email="ghost@example.com")

        assert transient.id is None
        assert posts_of(db, transient).all() == []

    def test_query_is_restartable_and_sees_new_rows(self, db, make_user, make_post):
        user = make_user()
        make_post(user)
        query = posts_of(db, user)

        assert len(query.all()) == 1
        make_post(user)
        assert len(query.all()) == 2

    def test_every_result_belongs_to_user(self, db, make_user, make_post):
        user = make_user()
        for _ in range(3):
            make_post(user)
        make_post(make_user("other"))

        assert all(p.user_id == user.id for p in posts_of(db, user))


class TestOpenPostsOf:
    def test_example_scenario(self, db, make_user, make_post):
        user = make_user()
        open_post = make_post(user, status="open")
        closed_post = make_post(user, status="closed")

        assert _ids(posts_of(db, user)) == {open_post.id, closed_post.id}
        assert _ids(open_posts_of(db, user)) == {open_post.id}

    def test_is_subset_of_posts_of(self, db, make_user, make_post):
        user = make_user()
        for status in ("open", "closed", "open", "closed"):
            make_post(user, status=status)

        assert _ids(open_posts_of(db, user)) <= _ids(posts_of(db, user))
        assert all(p.status == "open" for p in open_posts_of(db, user))

    def test_excludes_open_posts_of_other_users(self, db, make_user, make_post):
        alice = make_user("alice")
        make_post(make_user("bob"), status="open")

        assert open_posts_of(db, alice).all() == []

    def test_uses_the_post_model_filter(self, db, make_user, make_post):
        user = make_user()
        closed = make_post(user, status="closed")
        make_post(user, status="open")

        class ClosedIsOpen:
            @staticmethod
            def filter_open(query):
                return query.filter(Post.status == "closed")

        assert _ids(open_posts_of(db, user, post_model=ClosedIsOpen)) == {closed.id}

    def test_missing_filter_raises_capability_missing(self, db, make_user, make_post):
        user = make_user()
        make_post(user)

        class BarePost:
            pass

        with pytest.raises(CapabilityMissing) as exc_info:
            open_posts_of(db, user, post_model=BarePost)
        assert exc_info.value.entity == "BarePost"
        assert exc_info.value.capability == "filter_open"

    def test_missing_filter_is_not_an_empty_result(self, db, make_user):
        # No posts at all, still a configuration error
        user = make_user()
        with pytest.raises(CapabilityMissing):
            open_posts_of(db, user, post_model=object)
