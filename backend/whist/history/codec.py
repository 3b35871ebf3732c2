"""
Conversion between live sessions and saved history entries.

A saved entry keeps every locked round. Bets entered for the current,
unlocked round are not saved: resuming an unfinished game reopens that
round for bets.
"""

import json
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import ValidationError

from whist.history.models import HistoryEntry
from whist.logic.enums import GamePhase
from whist.logic.exceptions import CorruptHistoryError
from whist.logic.rounds import generate_rounds
from whist.logic.rules import MAX_PLAYERS, MIN_PLAYERS
from whist.logic.state import GameSession, Player, RoundRecord

logger = structlog.get_logger()


def to_history_entry(
    session: GameSession,
    game_name: str | None = None,
    *,
    now: datetime | None = None,
) -> HistoryEntry:
    """Snapshot a session. Blank game names are stored as None."""
    name = game_name.strip() if game_name else None
    return HistoryEntry(
        date=now or datetime.now(tz=UTC),
        game_name=name or None,
        player_names=session.player_names,
        rounds=session.rounds,
        final_scores=session.cumulative_scores,
        current_round_index=session.current_round_index,
        in_progress=session.phase != GamePhase.FINISHED,
    )


def _check_entry(entry: HistoryEntry) -> tuple[int, ...]:
    """Validate an entry can be resumed and return its round sequence."""
    num_players = len(entry.player_names)
    if not (MIN_PLAYERS <= num_players <= MAX_PLAYERS):
        raise CorruptHistoryError(f"Saved game has {num_players} players, expected {MIN_PLAYERS}-{MAX_PLAYERS}")

    round_spec = generate_rounds(num_players)
    if entry.current_round_index >= len(round_spec):
        raise CorruptHistoryError(
            f"Saved round index {entry.current_round_index} is outside a {len(round_spec)}-round game"
        )

    last_index = len(round_spec) - 1
    if not entry.in_progress and entry.current_round_index != last_index:
        raise CorruptHistoryError(
            f"Saved game is marked finished at round {entry.current_round_index + 1} of {len(round_spec)}"
        )

    expected_rounds = entry.current_round_index + (0 if entry.in_progress else 1)
    if len(entry.rounds) != expected_rounds:
        raise CorruptHistoryError(f"Saved game has {len(entry.rounds)} rounds, expected {expected_rounds}")

    for index, record in enumerate(entry.rounds):
        if len(record.bets) != num_players:
            raise CorruptHistoryError(f"Round {index + 1} has {len(record.bets)} entries for {num_players} players")
        if record.hand_size != round_spec[index]:
            raise CorruptHistoryError(
                f"Round {index + 1} was dealt {record.hand_size} cards, expected {round_spec[index]}"
            )

    totals = running_totals(entry.rounds, num_players)
    expected_scores = totals[-1] if totals else (0,) * num_players
    if entry.final_scores != expected_scores:
        raise CorruptHistoryError("Saved scores do not match the sum of round points")
    return round_spec


def from_history_entry(entry: HistoryEntry) -> GameSession:
    """
    Rebuild a session from a saved entry.

    Unfinished games resume at the start of the saved round, in BET phase.
    Finished games do not follow that rule: they come back FINISHED, on the
    last round, so their final standings can be shown and no further round
    can be played.

    Raises:
        CorruptHistoryError: If the entry is inconsistent with the ruleset

    """
    round_spec = _check_entry(entry)
    return GameSession(
        players=tuple(Player(seat=seat, name=name) for seat, name in enumerate(entry.player_names)),
        round_spec=round_spec,
        current_round_index=entry.current_round_index,
        phase=GamePhase.BET if entry.in_progress else GamePhase.FINISHED,
        cumulative_scores=entry.final_scores,
        rounds=entry.rounds,
    )


def running_totals(rounds: Sequence[RoundRecord], num_players: int) -> list[tuple[int, ...]]:
    """Return the cumulative scores after each round, for score sheets."""
    totals: list[tuple[int, ...]] = []
    current = (0,) * num_players
    for record in rounds:
        current = tuple(total + points for total, points in zip(current, record.points, strict=True))
        totals.append(current)
    return totals


def entries_to_json(entries: Sequence[HistoryEntry]) -> str:
    """Serialize a history collection to a JSON array."""
    return json.dumps([entry.model_dump(mode="json", by_alias=True) for entry in entries])


def entries_from_json(content: str) -> list[HistoryEntry]:
    """
    Parse a history collection, dropping what cannot be read.

    An unparseable document or a non-array root yields an empty list.
    Individual entries that fail validation are skipped.
    """
    try:
        data: Any = json.loads(content)
    except json.JSONDecodeError:
        logger.warning("history document is not valid JSON, starting empty")
        return []

    if not isinstance(data, list):
        logger.warning("history document root is not an array, starting empty", root_type=type(data).__name__)
        return []

    entries: list[HistoryEntry] = []
    for position, item in enumerate(data):
        try:
            entries.append(HistoryEntry.model_validate(item))
        except ValidationError as exc:
            logger.warning("skipping unreadable history entry", position=position, errors=exc.error_count())
    return entries
