from typing import Any, Dict, Optional

OPTION_COUNT = 4


class Phase:
    """Answer lifecycle of the current question."""

    IDLE = 'idle'
    LOADED = 'loaded'
    OPEN = 'open'
    CLOSED = 'closed'
    REVEALED = 'revealed'


def is_valid_option(value: Any) -> bool:
    # bool is an int subclass; True must not count as option 1
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value < OPTION_COUNT


class Player:
    """A named participant. The name is the identity; the sid is swappable.

    A player whose ``sid`` is ``None`` is a ghost: still known to the
    registry (and still ranked) but not shown in the roster.
    """

    def __init__(self, name: str, sid: Optional[str] = None):
        self.name = name
        self.sid = sid
        self.score = 0
        self.current_answer: Optional[int] = None
        self.answered = False

    @property
    def is_connected(self) -> bool:
        return self.sid is not None

    def clear_answer(self) -> None:
        self.current_answer = None
        self.answered = False

    def __repr__(self):
        return f'<Player {self.name!r} sid={self.sid} score={self.score}>'


class SessionState:
    """Process-wide state of the single live session."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.join_locked = False
        self.phase = Phase.IDLE
        self.current_question: Optional[Dict[str, Any]] = None

    @property
    def answers_open(self) -> bool:
        return self.phase == Phase.OPEN

    @property
    def revealed(self) -> bool:
        return self.phase == Phase.REVEALED

    def to_dict(self):
        return {
            'phase': self.phase,
            'join_locked': self.join_locked,
            'current_question': self.current_question,
        }
