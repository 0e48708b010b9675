from conftest import make_game_with_questions


def _events(sio_client, name):
    return [event["args"][0] for event in sio_client.get_received() if event["name"] == name]


def test_owner_receives_game_state(socket_client, sign_in, user, game_w_questions):
    sign_in(user)
    sio = socket_client()

    sio.emit("join_game", {"game_id": game_w_questions.id})

    states = _events(sio, "game_state")
    assert len(states) == 1
    assert states[0]["id"] == game_w_questions.id
    assert states[0]["status"] == "in_progress"


def test_owner_is_told_about_answers(socket_client, client, sign_in, user, game_w_questions):
    sign_in(user)
    sio = socket_client()
    sio.emit("join_game", {"game_id": game_w_questions.id})
    sio.get_received()

    client.put(f"/games/{game_w_questions.id}/answer", data={"letter": "d"})

    updates = _events(sio, "game_update")
    assert len(updates) == 1
    assert updates[0]["current_level"] == 1


def test_left_game_gets_no_updates(socket_client, client, sign_in, user, game_w_questions):
    sign_in(user)
    sio = socket_client()
    sio.emit("join_game", {"game_id": game_w_questions.id})
    sio.emit("leave_game", {"game_id": game_w_questions.id})
    sio.get_received()

    client.put(f"/games/{game_w_questions.id}/answer", data={"letter": "d"})

    assert _events(sio, "game_update") == []


def test_stranger_cannot_join(socket_client, sign_in, user, other_user):
    foreign_game = make_game_with_questions(other_user)
    sign_in(user)
    sio = socket_client()

    sio.emit("join_game", {"game_id": foreign_game.id})

    names = [event["name"] for event in sio.get_received()]
    assert names == ["game_error"]


def test_anonymous_cannot_join(socket_client, game_w_questions):
    sio = socket_client()

    sio.emit("join_game", {"game_id": game_w_questions.id})

    assert _events(sio, "game_error") == [{"msg": "Sign in first."}]


def test_bad_game_id(socket_client, sign_in, user):
    sign_in(user)
    sio = socket_client()

    sio.emit("join_game", {"game_id": "abc"})

    assert _events(sio, "game_error") == [{"msg": "Missing game id."}]
