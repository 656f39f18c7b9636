from typing import Any, Dict, Iterable, List

from trivia.models import OPTION_COUNT, Player, is_valid_option


class RevealOutcome:
    def __init__(self, distribution: List[int], not_answered: int,
                 results: Dict[str, Dict[str, Any]], scoreboard: List[Dict[str, Any]]):
        self.distribution = distribution
        self.not_answered = not_answered
        # keyed by player name
        self.results = results
        self.scoreboard = scoreboard

    def host_payload(self):
        return {
            'distribution': list(self.distribution),
            'notAnswered': self.not_answered,
            'scoreboard': self.scoreboard,
        }


def rank_scoreboard(players: Iterable[Player]) -> List[Dict[str, Any]]:
    """All players (ghosts too) by descending score; ties keep join order."""
    entries = [{'name': p.name, 'score': p.score} for p in players]
    # sorted() is stable, so equal scores stay in input order
    return sorted(entries, key=lambda e: -e['score'])


def score_reveal(players: Iterable[Player], correct_index: int, points: int) -> RevealOutcome:
    """Apply scoring for the revealed question.

    The distribution counts connected players only; every player, ghost or
    not, is scored. ``points`` is added as given, without clamping.
    """
    players = list(players)
    distribution = [0] * OPTION_COUNT
    not_answered = 0
    for p in players:
        if not p.is_connected:
            continue
        if p.answered and is_valid_option(p.current_answer):
            distribution[p.current_answer] += 1
        else:
            not_answered += 1

    results: Dict[str, Dict[str, Any]] = {}
    for p in players:
        was_correct = p.answered and p.current_answer == correct_index
        if was_correct:
            p.score += points
        results[p.name] = {
            'wasCorrect': was_correct,
            'yourAnswer': p.current_answer,
            'correctIndex': correct_index,
            'points': points if was_correct else 0,
            'totalScore': p.score,
            'answered': p.answered,
        }

    return RevealOutcome(distribution, not_answered, results, rank_scoreboard(players))
