import logging
from typing import Dict, Iterator, List, Optional

from trivia.models import Phase, Player, is_valid_option

logger = logging.getLogger(__name__)

NAME_REQUIRED = 'Name is required'
NAME_TAKEN = 'That name is already taken. Try a different one.'
JOIN_WINDOW_CLOSED = 'Game has already started. You can no longer join.'


class JoinRejected(ValueError):
    """A join attempt was refused; ``str(exc)`` is the reason shown to the player."""


class PlayerRegistry:
    """Known players keyed by name, kept in join order."""

    def __init__(self, max_name_length: int = 20):
        self.max_name_length = max_name_length
        self._players: Dict[str, Player] = {}

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players.values()))

    def __len__(self) -> int:
        return len(self._players)

    def by_name(self, name: str) -> Optional[Player]:
        return self._players.get(name)

    def by_connection(self, sid: Optional[str]) -> Optional[Player]:
        if sid is None:
            return None
        for player in self._players.values():
            if player.sid == sid:
                return player
        return None

    def clean_name(self, name) -> str:
        if not isinstance(name, str):
            return ''
        return name.strip()[:self.max_name_length]

    def join(self, name, sid: str, join_locked: bool) -> Player:
        """Bind ``sid`` to a player named ``name``.

        Before the lock a new player is created; after the lock only a known
        name (connected or ghost) can be reclaimed, keeping its score.
        A connection holds one player at a time: switching names releases
        the previous one. Raises :class:`JoinRejected` without changing
        anything otherwise.
        """
        cleaned = self.clean_name(name)
        if not cleaned:
            raise JoinRejected(NAME_REQUIRED)

        previous = self.by_connection(sid)
        if previous is not None and previous.name == cleaned:
            return previous

        existing = self._players.get(cleaned)
        if join_locked:
            if existing is None:
                raise JoinRejected(JOIN_WINDOW_CLOSED)
            self._release(previous, join_locked)
            existing.sid = sid
            logger.info(f"[reconnect] {cleaned} rebound to sid={sid} score={existing.score}")
            return existing

        if existing is not None:
            raise JoinRejected(NAME_TAKEN)
        self._release(previous, join_locked)
        player = Player(cleaned, sid)
        self._players[cleaned] = player
        logger.info(f"[join] {cleaned} joined ({len(self._players)} total)")
        return player

    def _release(self, player: Optional[Player], join_locked: bool) -> None:
        if player is None:
            return
        if join_locked:
            player.sid = None
            logger.info(f"[ghost] {player.name} disconnected, can rejoin")
        else:
            del self._players[player.name]
            logger.info(f"[leave] {player.name} left")

    def submit_answer(self, sid: str, option_index, phase: str) -> bool:
        if phase != Phase.OPEN:
            return False
        player = self.by_connection(sid)
        if player is None or player.answered:
            return False
        if not is_valid_option(option_index):
            return False
        player.current_answer = option_index
        player.answered = True
        return True

    def disconnect(self, sid: str, join_locked: bool) -> Optional[Player]:
        player = self.by_connection(sid)
        if player is None:
            return None
        self._release(player, join_locked)
        return player

    def reset_all_answers(self) -> None:
        for player in self._players.values():
            player.clear_answer()

    def reset(self) -> None:
        self._players.clear()

    def roster(self) -> List[str]:
        return [p.name for p in self._players.values() if p.is_connected]

    def connected(self) -> List[Player]:
        return [p for p in self._players.values() if p.is_connected]

    def counts(self):
        return {'connected': len(self.connected()), 'total': len(self._players)}

    def answer_count(self):
        answered = sum(1 for p in self._players.values() if p.answered)
        return {'answered': answered, 'total': len(self._players)}
