import logging

logger = logging.getLogger(__name__)

PLAYERS_ROOM = 'players'

_NO_PAYLOAD = object()


class SocketIOFanout:
    """Named-message delivery over Flask-SocketIO.

    Every send is fire-and-forget: a failure is logged and swallowed so one
    bad connection never stops delivery to the others or undoes state.
    """

    def __init__(self, socketio, namespace='/'):
        self.socketio = socketio
        self.namespace = namespace

    def _emit(self, event, payload, to=None):
        args = () if payload is _NO_PAYLOAD else (payload,)
        try:
            self.socketio.emit(event, *args, to=to, namespace=self.namespace)
        except Exception as exc:
            logger.warning(f"[fanout-fail] event={event} to={to or '*'}: {exc}")

    def to_connection(self, sid, event, payload=_NO_PAYLOAD):
        self._emit(event, payload, to=sid)

    def to_players(self, event, payload=_NO_PAYLOAD):
        self._emit(event, payload, to=PLAYERS_ROOM)

    def to_all(self, event, payload=_NO_PAYLOAD):
        self._emit(event, payload)

    def add_to_players(self, sid):
        try:
            self.socketio.server.enter_room(sid, PLAYERS_ROOM, namespace=self.namespace)
        except Exception as exc:
            logger.warning(f"[fanout-fail] could not add sid={sid} to {PLAYERS_ROOM}: {exc}")
