from urllib.parse import urlparse

import pytest

from app import create_app
from config import TestConfig
from extensions import db, socketio
from millionaire.constants import QUESTION_LEVELS
from millionaire.models import Game, GameQuestion, Question, User


def make_question(level, n=0):
    return Question(
        level=level,
        text=f"Question {n} of level {level}?",
        answer1=f"right {n}",
        answer2=f"wrong {n}.2",
        answer3=f"wrong {n}.3",
        answer4=f"wrong {n}.4",
    )


def make_user(name, email, password="secret123"):
    user = User(name=name, email=email)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def make_game_with_questions(user):
    """A game whose every question has the right answer behind letter d."""
    game = Game(user=user)
    for level in QUESTION_LEVELS:
        game.game_questions.append(
            GameQuestion(question=make_question(level, level), a=4, b=3, c=2, d=1)
        )
    db.session.add(game)
    db.session.commit()
    return game


def flashes(client):
    with client.session_transaction() as sess:
        return list(sess.get("_flashes", []))


def flash_categories(client):
    return [category for category, _ in flashes(client)]


def redirect_path(response):
    return urlparse(response.headers["Location"]).path


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(app):
    return make_user("Ivan", "ivan@example.com")


@pytest.fixture
def other_user(app):
    return make_user("Petr", "petr@example.com")


@pytest.fixture
def game_w_questions(user):
    return make_game_with_questions(user)


@pytest.fixture
def generate_questions(app):
    """Creates `count` questions spread evenly over the levels."""
    def generate(count):
        for n in range(count):
            db.session.add(make_question(n % len(QUESTION_LEVELS), n))
        db.session.commit()
    return generate


@pytest.fixture
def sign_in(client):
    def sign_in(user):
        with client.session_transaction() as sess:
            sess["user_id"] = user.id
    return sign_in


@pytest.fixture
def socket_client(app, client):
    def connect():
        return socketio.test_client(app, flask_test_client=client)
    return connect
