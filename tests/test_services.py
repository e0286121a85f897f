"""Tests for the service layer."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from cicd_demo_api.app.core.errors import InvalidInput, InvalidReference, NotFound
from cicd_demo_api.app.core.store import Post
from cicd_demo_api.app.schemas.post import PostCreate
from cicd_demo_api.app.schemas.user import UserCreate
from cicd_demo_api.app.services.data_service import DataService
from cicd_demo_api.app.services.post_service import UNKNOWN_AUTHOR, PostService
from cicd_demo_api.app.services.user_service import UserService


class TestUserService:
    def test_create_and_get_round_trip(self, store):
        service = UserService(store)
        created = service.create_user(UserCreate(name="Alice", email="alice@example.com", role="admin"))
        assert created.id == 3
        assert service.get_user(created.id) == created

    def test_role_defaults_to_user(self, store):
        created = UserService(store).create_user(UserCreate(name="Bob", email="bob@example.com"))
        assert created.role == "user"

    def test_ids_increase_across_creations(self, store):
        service = UserService(store)
        previous = max(u.id for u in service.list_users())
        for i in range(3):
            user = service.create_user(UserCreate(name=f"n{i}", email=f"e{i}@example.com"))
            assert user.id > previous
            previous = user.id

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "A"},
            {"email": "a@example.com"},
            {"name": "", "email": "a@example.com"},
            {"name": "A", "email": ""},
            {},
        ],
    )
    def test_missing_fields_rejected_without_consuming_id(self, store, payload):
        with pytest.raises(InvalidInput) as excinfo:
            UserService(store).create_user(UserCreate(**payload))
        assert excinfo.value.message == "Name and email are required"
        assert store.next_user_id == 3
        assert store.count_users() == 2

    def test_unknown_user(self, store):
        with pytest.raises(NotFound, match="User not found"):
            UserService(store).get_user(999)

    def test_unparsable_id_is_not_found(self, store):
        with pytest.raises(NotFound):
            UserService(store).get_user(None)

    def test_concurrent_creations_get_unique_ids(self, empty_store):
        service = UserService(empty_store)

        def create(i):
            return service.create_user(UserCreate(name=f"u{i}", email=f"u{i}@example.com")).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(create, range(200)))
        assert sorted(ids) == list(range(1, 201))
        assert empty_store.next_user_id == 201


class TestPostService:
    def test_create_post_for_seeded_user(self, store):
        post = PostService(store).create_post(PostCreate(title="X", content="Y", user_id=1))
        assert post.id == 3
        assert post.author == "John Doe"
        assert post.user_id == 1

    def test_invalid_reference_leaves_counter(self, store):
        with pytest.raises(InvalidReference, match="Invalid userId"):
            PostService(store).create_post(PostCreate(title="X", content="Y", user_id=999))
        assert store.next_post_id == 3
        assert store.count_posts() == 2

    def test_missing_fields_checked_before_reference(self, store):
        with pytest.raises(InvalidInput, match="Title, content, and userId are required"):
            PostService(store).create_post(PostCreate(content="Y", user_id=999))

    def test_zero_user_id_counts_as_missing(self, store):
        with pytest.raises(InvalidInput):
            PostService(store).create_post(PostCreate(title="X", content="Y", user_id=0))

    def test_concurrent_creations_and_reset_keep_ids_and_references_valid(self, store):
        posts = PostService(store)
        users = UserService(store)
        data = DataService(store)

        def work(i):
            if i == 100:
                data.reset()
                users.create_user(UserCreate(name="A", email="a@example.com"))
                users.create_user(UserCreate(name="B", email="b@example.com"))
                return None
            try:
                return posts.create_post(PostCreate(title=f"t{i}", content="c", user_id=i % 2 + 1)).id
            except InvalidReference:
                return None

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(work, range(300)))

        remaining = store.list_posts()
        ids = [p.id for p in remaining]
        assert len(ids) == len(set(ids))
        assert ids == sorted(ids)
        assert all(store.find_user(p.user_id) is not None for p in remaining)
        assert store.next_post_id == (ids[-1] + 1 if ids else 1)
        assert all(store.find_post(post_id) is post for post_id, post in zip(ids, remaining))

    def test_list_resolves_authors(self, store):
        posts = PostService(store).list_posts()
        assert [p.author for p in posts] == ["John Doe", "Jane Smith"]

    def test_dangling_reference_resolves_to_unknown(self, store):
        store.insert_post(Post(id=10, title="Orphan", content="No author", user_id=42))
        service = PostService(store)
        assert service.get_post(10).author == UNKNOWN_AUTHOR
        assert service.list_posts()[-1].author == UNKNOWN_AUTHOR

    def test_unknown_post(self, store):
        with pytest.raises(NotFound, match="Post not found"):
            PostService(store).get_post(999)


class TestDataService:
    def test_summary_of_seeded_store(self, store):
        summary = DataService(store).dashboard_summary()
        assert summary.total_users == 2
        assert summary.total_posts == 2
        assert [u.id for u in summary.recent_users] == [1, 2]
        assert [p.author for p in summary.recent_posts] == ["John Doe", "Jane Smith"]

    def test_recent_posts_capped_at_three_in_insertion_order(self, store):
        posts = PostService(store)
        for title in ("a", "b", "c", "d"):
            posts.create_post(PostCreate(title=title, content="body", user_id=2))
        summary = DataService(store).dashboard_summary()
        assert summary.total_posts == 6
        assert [p.title for p in summary.recent_posts] == ["b", "c", "d"]

    def test_reset_then_create_uses_floor_id(self, store):
        DataService(store).reset()
        assert UserService(store).list_users() == []
        assert PostService(store).list_posts() == []
        assert UserService(store).create_user(UserCreate(name="A", email="a@example.com")).id == 1
