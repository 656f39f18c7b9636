"""Inbound Socket.IO message kinds and payload validation.

Each inbound event has a fixed name and a parser that turns the raw
payload into plain values or raises :class:`InvalidMessage`. Handlers
never read fields straight off client-supplied dicts.
"""
from typing import Any, Dict, Tuple

from trivia.models import is_valid_option

# host -> server
LOCK_JOINING = 'lock-joining'
LOAD_QUESTION = 'load-question'
OPEN_ANSWERS = 'open-answers'
CLOSE_ANSWERS = 'close-answers'
REVEAL_ANSWER = 'reveal-answer'
ROUND_SPLASH = 'round-splash'
GAME_OVER = 'game-over'
RESET_GAME = 'reset-game'

# player -> server
PLAYER_JOIN = 'player-join'
SUBMIT_ANSWER = 'submit-answer'


class InvalidMessage(ValueError):
    """Payload does not have the shape its event requires."""


def _require_dict(event: str, data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise InvalidMessage(f'{event} expects an object payload')
    return data


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_player_join(data: Any) -> Any:
    # name validation (trim, length, emptiness) belongs to the registry
    if not isinstance(data, dict):
        return None
    return data.get('name')


def parse_submit_answer(data: Any) -> Any:
    """Return the raw option index; the registry ignores invalid ones."""
    if not isinstance(data, dict):
        return None
    return data.get('optionIndex')


def parse_question(data: Any) -> Dict[str, Any]:
    return dict(_require_dict(LOAD_QUESTION, data))


def parse_reveal(data: Any) -> Tuple[int, int]:
    data = _require_dict(REVEAL_ANSWER, data)
    correct_index = data.get('correctIndex')
    points = data.get('points')
    if not is_valid_option(correct_index):
        raise InvalidMessage('correctIndex must be an integer between 0 and 3')
    if not _is_int(points):
        raise InvalidMessage('points must be an integer')
    return correct_index, points


def parse_splash(data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    return dict(_require_dict(ROUND_SPLASH, data))
