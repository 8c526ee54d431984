"""Command results and rejection reasons returned to the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

from dopewars.domain.state import GameState


class Rejection(str, Enum):
    """Why a command was refused. Several may apply at once."""

    GAME_OVER = "game_over"
    ENCOUNTER_PENDING = "encounter_pending"
    NO_ENCOUNTER = "no_encounter"
    FEATURE_DISABLED = "feature_disabled"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    INSUFFICIENT_CASH = "insufficient_cash"
    INSUFFICIENT_SPACE = "insufficient_space"
    INSUFFICIENT_INVENTORY = "insufficient_inventory"
    EXCEEDS_DEBT = "exceeds_debt"
    SAME_LOCATION = "same_location"
    WEAPON_NOT_OWNED = "weapon_not_owned"
    NO_STASH_HOUSE = "no_stash_house"
    STASH_HOUSE_OWNED = "stash_house_owned"
    INSUFFICIENT_STASH_SPACE = "insufficient_stash_space"
    INSUFFICIENT_STASH_INVENTORY = "insufficient_stash_inventory"

    @property
    def text(self) -> str:
        return _REJECTION_TEXT[self]


_REJECTION_TEXT = {
    Rejection.GAME_OVER: "The game is over.",
    Rejection.ENCOUNTER_PENDING: "Deal with the cops first.",
    Rejection.NO_ENCOUNTER: "Nobody is stopping you.",
    Rejection.FEATURE_DISABLED: "Not available in this edition.",
    Rejection.NON_POSITIVE_AMOUNT: "Amount must be positive.",
    Rejection.INSUFFICIENT_CASH: "Not enough cash.",
    Rejection.INSUFFICIENT_SPACE: "Not enough space.",
    Rejection.INSUFFICIENT_INVENTORY: "Not enough inventory.",
    Rejection.EXCEEDS_DEBT: "Amount exceeds debt.",
    Rejection.SAME_LOCATION: "You are already there.",
    Rejection.WEAPON_NOT_OWNED: "You don't own that weapon.",
    Rejection.NO_STASH_HOUSE: "You don't have a stash house here.",
    Rejection.STASH_HOUSE_OWNED: "You already own a stash house here.",
    Rejection.INSUFFICIENT_STASH_SPACE: "Not enough space in the stash house.",
    Rejection.INSUFFICIENT_STASH_INVENTORY: "Not enough inventory in the stash house.",
}


@dataclass(slots=True)
class CommandResult:
    """Outcome of one command: accepted with messages, or rejected with reasons."""

    action: str
    accepted: bool
    reasons: Tuple[Rejection, ...] = ()
    messages: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.accepted

    def describe(self) -> str:
        """Human readable summary, combining every rejection reason."""
        if self.accepted:
            return " ".join(self.messages)
        return f"Cannot {self.action}: " + " ".join(reason.text for reason in self.reasons)


def blocking_reasons(state: GameState) -> Tuple[Rejection, ...]:
    """Reasons that refuse every ordinary command regardless of its arguments."""
    if not state.is_running:
        return (Rejection.GAME_OVER,)
    if state.pending_encounter is not None:
        return (Rejection.ENCOUNTER_PENDING,)
    return ()


def accepted(action: str, messages: Sequence[str] = ()) -> CommandResult:
    return CommandResult(action=action, accepted=True, messages=list(messages))


def logged(state: GameState, action: str, messages: Sequence[str]) -> CommandResult:
    """Append messages to the game log and wrap them in an accepted result."""
    state.message_log.extend(messages)
    return accepted(action, messages)


def rejected(action: str, reasons: Sequence[Rejection]) -> CommandResult:
    return CommandResult(action=action, accepted=False, reasons=tuple(reasons))
