import pytest
from sqlalchemy.exc import IntegrityError

from edgeblog.extensions import db
from edgeblog.models import Comment, Post
from tests.conftest import make_post


@pytest.fixture
def post(user):
    return make_post(user)


class TestAddComment:
    def test_registered_author(self, client, user, post):
        response = client.post(f"/{post.id}", json={"content": "Great post!", "authorId": str(user.id)})

        assert response.status_code == 201
        comment = response.get_json()
        assert comment["content"] == "Great post!"
        assert comment["post"] == post.id
        assert comment["author"] == {"id": user.id, "name": "Ada Lovelace", "email": "ada@example.com"}
        assert comment["author_info"] is None

    def test_anonymous_author(self, client, post):
        response = client.post(
            f"/{post.id}",
            json={"content": "Thanks", "author_info": {"fullName": "Chidi", "email": "Chidi@Example.com"}},
        )

        assert response.status_code == 201
        comment = response.get_json()
        assert comment["author"] is None
        assert comment["author_info"] == {"fullName": "Chidi", "email": "chidi@example.com"}

    def test_increments_comment_count_once_per_call(self, client, post):
        for text in ("one", "two", "three"):
            client.post(f"/{post.id}", json={"content": text, "author_info": {"fullName": "Anon"}})

        assert db.session.get(Post, post.id).comment_count == 3

    def test_registered_author_wins_over_author_info(self, client, user, post):
        response = client.post(
            f"/{post.id}",
            json={"content": "Both", "authorId": user.id, "author_info": {"fullName": "Someone"}},
        )

        assert response.status_code == 201
        assert response.get_json()["author"]["id"] == user.id
        assert response.get_json()["author_info"] is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"author_info": {"fullName": "Anon"}},
            {"content": "   ", "author_info": {"fullName": "Anon"}},
            {"content": "x" * 501, "author_info": {"fullName": "Anon"}},
            {"content": "No author"},
            {"content": "Empty info", "author_info": {"fullName": "", "email": ""}},
            {"content": "Bad id", "authorId": "abc"},
        ],
    )
    def test_validation(self, client, post, payload):
        response = client.post(f"/{post.id}", json=payload)

        assert response.status_code == 400
        assert db.session.get(Post, post.id).comment_count == 0

    def test_missing_post(self, client):
        response = client.post("/999", json={"content": "Hi", "author_info": {"fullName": "Anon"}})

        assert response.status_code == 404
        assert Comment.query.count() == 0

    def test_malformed_post_id(self, client):
        response = client.post("/not-a-post", json={"content": "Hi", "author_info": {"fullName": "Anon"}})
        assert response.status_code == 400

    def test_reply_is_nested_under_parent(self, client, post):
        parent = client.post(f"/{post.id}", json={"content": "Parent", "author_info": {"fullName": "A"}})
        parent_id = parent.get_json()["id"]

        reply = client.post(
            f"/{post.id}",
            json={"content": "Reply", "author_info": {"fullName": "B"}, "parentId": parent_id},
        )

        assert reply.status_code == 201
        listed = client.get(f"/posts/{post.id}/comments").get_json()
        assert [c["content"] for c in listed] == ["Parent"]
        assert [r["content"] for r in listed[0]["replies"]] == ["Reply"]

    def test_reply_to_comment_on_another_post(self, client, user, post):
        other = make_post(user, title="Another post")
        parent = client.post(f"/{other.id}", json={"content": "Elsewhere", "author_info": {"fullName": "A"}})

        response = client.post(
            f"/{post.id}",
            json={"content": "Reply", "author_info": {"fullName": "B"}, "parentId": parent.get_json()["id"]},
        )

        assert response.status_code == 404


class TestListComments:
    def test_newest_first(self, client, post):
        for text in ("older", "newer"):
            client.post(f"/{post.id}", json={"content": text, "author_info": {"email": "a@b.com"}})

        response = client.get(f"/posts/{post.id}/comments")

        assert response.status_code == 200
        assert [c["content"] for c in response.get_json()] == ["newer", "older"]

    def test_no_comments(self, client, post):
        assert client.get(f"/posts/{post.id}/comments").status_code == 404

    def test_malformed_id(self, client):
        assert client.get("/posts/abc/comments").status_code == 400


class TestCommentLikes:
    def test_toggle(self, client, post, auth_headers):
        created = client.post(f"/{post.id}", json={"content": "Like me", "author_info": {"fullName": "A"}})
        comment_id = created.get_json()["id"]

        first = client.post(f"/comments/{comment_id}/like", headers=auth_headers)
        second = client.post(f"/comments/{comment_id}/like", headers=auth_headers)

        assert first.get_json() == {"action": "liked", "likeCount": 1}
        assert second.get_json() == {"action": "unliked", "likeCount": 0}

    def test_requires_token(self, client, post):
        assert client.post("/comments/1/like").status_code == 401

    def test_missing_comment(self, client, auth_headers):
        assert client.post("/comments/999/like", headers=auth_headers).status_code == 404


def test_schema_rejects_both_author_kinds(user, post):
    db.session.add(Comment(content="Both", post_id=post.id, author_id=user.id, author_name="Someone"))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_schema_rejects_missing_author(post):
    db.session.add(Comment(content="Nobody", post_id=post.id))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()
