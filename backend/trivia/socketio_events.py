from flask import current_app, request
from flask_socketio import emit

from trivia import socketio, get_game
from trivia import messages
from trivia.messages import InvalidMessage
from trivia.services.game import JoinRejected


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _reject(exc: Exception) -> None:
    current_app.logger.info(f"[rejected] sid={_get_sid()}: {exc}")
    emit('error', {'message': str(exc)})


def handle_connect(auth=None):
    current_app.logger.debug(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    get_game().disconnect(_get_sid())


# ---- player events ----

def handle_player_join(data=None):
    name = messages.parse_player_join(data)
    try:
        get_game().join(_get_sid(), name)
    except JoinRejected as exc:
        current_app.logger.info(f"[join-error] sid={_get_sid()}: {exc}")
        emit('join-error', str(exc))


def handle_submit_answer(data=None):
    get_game().submit_answer(_get_sid(), messages.parse_submit_answer(data))


# ---- host events ----

def handle_lock_joining(data=None):
    get_game().lock_joining()


def handle_load_question(data=None):
    try:
        payload = messages.parse_question(data)
    except InvalidMessage as exc:
        return _reject(exc)
    get_game().load_question(payload)


def handle_open_answers(data=None):
    get_game().open_answers()


def handle_close_answers(data=None):
    get_game().close_answers()


def handle_reveal_answer(data=None):
    try:
        correct_index, points = messages.parse_reveal(data)
    except InvalidMessage as exc:
        return _reject(exc)
    get_game().reveal_answer(_get_sid(), correct_index, points)


def handle_round_splash(data=None):
    try:
        payload = messages.parse_splash(data)
    except InvalidMessage as exc:
        return _reject(exc)
    get_game().round_splash(payload)


def handle_game_over(data=None):
    get_game().game_over()


def handle_reset_game(data=None):
    get_game().reset_session()


_HANDLERS = {
    messages.PLAYER_JOIN: handle_player_join,
    messages.SUBMIT_ANSWER: handle_submit_answer,
    messages.LOCK_JOINING: handle_lock_joining,
    messages.LOAD_QUESTION: handle_load_question,
    messages.OPEN_ANSWERS: handle_open_answers,
    messages.CLOSE_ANSWERS: handle_close_answers,
    messages.REVEAL_ANSWER: handle_reveal_answer,
    messages.ROUND_SPLASH: handle_round_splash,
    messages.GAME_OVER: handle_game_over,
    messages.RESET_GAME: handle_reset_game,
}


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    for event, handler in _HANDLERS.items():
        socketio.on_event(event, handler, namespace=namespace)
