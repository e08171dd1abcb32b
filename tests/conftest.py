"""
Fixtures compartidos: app con TestingConfig, SQLite en memoria y un blob
store falso que registra las subidas y los borrados.
"""
import pytest
from werkzeug.security import generate_password_hash

from edgeblog import create_app
from edgeblog.auth.tokens import issue_token
from edgeblog.config import TestingConfig
from edgeblog.errors import UpstreamFailure
from edgeblog.extensions import db
from edgeblog.models import Post, User
from edgeblog.services.blob_store import StoredBlob


class FakeBlobStore:
    def __init__(self):
        self.puts = []
        self.deletes = []
        self.fail_put = False
        self.fail_delete = False

    def put(self, key, data):
        if self.fail_put:
            raise UpstreamFailure("Image upload failed. Please try again later.")
        self.puts.append(key)
        return StoredBlob(url=f"https://blobs.example.test/{key}", key=key)

    def delete(self, key):
        self.deletes.append(key)
        if self.fail_delete:
            raise UpstreamFailure(f"Could not delete blob {key}.")


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    app.extensions["blob_store"] = FakeBlobStore()
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def blob_store(app):
    return app.extensions["blob_store"]


def make_user(name="Ada Lovelace", email="ada@example.com", password="secret1", role="admin"):
    user = User(name=name, email=email, password_hash=generate_password_hash(password), role=role)
    db.session.add(user)
    db.session.commit()
    return user


def make_post(author, title="Hello World", category="news", **extra):
    from edgeblog.utils.slugs import generate_slug

    post = Post(
        title=title,
        slug=generate_slug(title),
        body=extra.pop("body", "Some body text."),
        category=category,
        author_id=author.id,
        **extra,
    )
    db.session.add(post)
    db.session.commit()
    return post


@pytest.fixture
def user(app):
    return make_user()


@pytest.fixture
def other_user(app):
    return make_user(name="Grace Hopper", email="grace@example.com", role="user")


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture
def other_headers(other_user):
    return {"Authorization": f"Bearer {issue_token(other_user)}"}
