import logging
import threading
from functools import wraps
from typing import Any, Dict, Optional

from trivia.models import Phase, Player, SessionState
from .registry import PlayerRegistry
from .scoring import RevealOutcome, rank_scoreboard, score_reveal

logger = logging.getLogger(__name__)


def _serialized(method):
    """Run the whole message handler under the session lock."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class GameSession:
    """The single live session: state, registry and the phase rules.

    Each public method handles one inbound message to completion, mutating
    state and then broadcasting through ``fanout``.
    """

    def __init__(self, fanout, max_name_length: int = 20):
        self.fanout = fanout
        self.state = SessionState()
        self.registry = PlayerRegistry(max_name_length=max_name_length)
        self._lock = threading.RLock()

    @property
    def phase(self) -> str:
        return self.state.phase

    # ---- broadcasts ----

    def _broadcast_roster(self) -> None:
        self.fanout.to_all('roster-update', self.registry.roster())

    def _broadcast_player_count(self) -> None:
        self.fanout.to_all('player-count', self.registry.counts())

    def _broadcast_answer_count(self) -> None:
        self.fanout.to_all('answer-count', self.registry.answer_count())

    # ---- player messages ----

    @_serialized
    def join(self, sid: str, name) -> Player:
        """Join or reconnect; raises JoinRejected without touching state."""
        reconnecting = self.state.join_locked
        player = self.registry.join(name, sid, self.state.join_locked)
        self.fanout.add_to_players(sid)
        self.fanout.to_connection(sid, 'join-success', {'name': player.name, 'score': player.score})
        self._broadcast_roster()
        self._broadcast_player_count()
        if reconnecting and self.state.current_question is not None:
            self.fanout.to_connection(sid, 'question-loaded', self.state.current_question)
            if self.state.answers_open:
                self.fanout.to_connection(sid, 'answers-opened')
        return player

    @_serialized
    def submit_answer(self, sid: str, option_index) -> bool:
        accepted = self.registry.submit_answer(sid, option_index, self.state.phase)
        if not accepted:
            return False
        player = self.registry.by_connection(sid)
        counts = self.registry.answer_count()
        logger.info(f"[answer] {player.name} answered {'ABCD'[option_index]} "
                    f"({counts['answered']}/{counts['total']})")
        self._broadcast_answer_count()
        return True

    @_serialized
    def disconnect(self, sid: str) -> Optional[Player]:
        player = self.registry.disconnect(sid, self.state.join_locked)
        self._broadcast_roster()
        self._broadcast_player_count()
        return player

    # ---- host messages ----

    @_serialized
    def lock_joining(self) -> bool:
        if self.state.join_locked:
            logger.debug("[lock-skip] joining already locked")
            return False
        self.state.join_locked = True
        self.fanout.to_all('joining-locked')
        logger.info(f"[lock] joining locked with {len(self.registry)} players registered")
        return True

    @_serialized
    def load_question(self, payload: Dict[str, Any]) -> None:
        self.state.current_question = payload
        self.state.phase = Phase.LOADED
        self.registry.reset_all_answers()
        self.fanout.to_players('question-loaded', payload)
        self._broadcast_answer_count()
        logger.info("[load] question loaded")

    @_serialized
    def open_answers(self) -> bool:
        if self.state.revealed:
            logger.info("[open-skip] question already revealed")
            return False
        self.state.phase = Phase.OPEN
        self.registry.reset_all_answers()
        self.fanout.to_players('answers-opened')
        self._broadcast_answer_count()
        logger.info("[open] answers opened")
        return True

    @_serialized
    def close_answers(self) -> None:
        # closing a revealed question must not make it revealable again
        if not self.state.revealed:
            self.state.phase = Phase.CLOSED
        self.fanout.to_players('answers-closed')
        counts = self.registry.answer_count()
        logger.info(f"[close] answers closed ({counts['answered']}/{counts['total']} answered)")

    @_serialized
    def reveal_answer(self, host_sid: Optional[str], correct_index: int, points: int) -> Optional[RevealOutcome]:
        """Score the current question once; repeats return ``None``."""
        if self.state.revealed:
            logger.info("[reveal-skip] question already revealed")
            return None
        self.state.phase = Phase.REVEALED
        self.fanout.to_players('answers-closed')

        outcome = score_reveal(self.registry, correct_index, points)
        for player in self.registry:
            if player.is_connected:
                self.fanout.to_connection(player.sid, 'answer-result', outcome.results[player.name])

        if host_sid is not None:
            self.fanout.to_connection(host_sid, 'answer-revealed', outcome.host_payload())
        self.fanout.to_all('scoreboard-update', outcome.scoreboard)
        logger.info(f"[reveal] correctIndex={correct_index} points={points}: "
                    f"{outcome.distribution[correct_index]} correct / {len(self.registry)} total")
        return outcome

    @_serialized
    def round_splash(self, payload: Dict[str, Any]) -> None:
        self.fanout.to_players('round-splash', payload)

    @_serialized
    def game_over(self):
        rankings = rank_scoreboard(self.registry)
        self.fanout.to_players('game-over', {'rankings': rankings})
        logger.info(f"[game-over] {len(rankings)} players ranked")
        return rankings

    @_serialized
    def reset_session(self) -> None:
        self.registry.reset()
        self.state.reset()
        self.fanout.to_all('game-reset')
        logger.info("[reset] game reset")

    # ---- read side ----

    @_serialized
    def snapshot(self) -> Dict[str, Any]:
        data = self.state.to_dict()
        data.update({
            'roster': self.registry.roster(),
            'players': self.registry.counts(),
            'answers': self.registry.answer_count(),
            'scoreboard': rank_scoreboard(self.registry),
        })
        return data
