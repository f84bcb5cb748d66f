"""
Finite-state interpreter that turns a token sequence into a Schedule.

The transition table is plain data: (state, token kind) -> (action, next
state). Pairs missing from the table are ignored, leaving the state
unchanged. There is no backtracking and no lookahead beyond the current
token.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Tuple

from .models import Schedule, Token, TokenKind
from .ranges import DayRangeBuilder, HourRangeBuilder

logger = logging.getLogger(__name__)


class State(str, Enum):
    START = "Start"
    DAY_FOUND = "DayFound"
    DAY_LINK = "DayLink"
    HOUR_FROM = "HourFrom"
    HOUR_LINK = "HourLink"
    HOUR_TO = "HourTo"


class Action(str, Enum):
    START_GROUP = "start_group"          # reset builders, add day
    ADD_DAY = "add_day"
    ADD_DAY_LINK = "add_day_link"
    SET_HOUR_FROM = "set_hour_from"
    ADD_HOUR_LINK = "add_hour_link"
    SET_HOUR_TO = "set_hour_to"
    RESET = "reset"
    COMMIT_AND_START_GROUP = "commit_and_start_group"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Transition:
    action: Action
    next_state: State


TRANSITIONS: Mapping[Tuple[State, TokenKind], Transition] = MappingProxyType({
    (State.START, TokenKind.DAY): Transition(Action.START_GROUP, State.DAY_FOUND),
    (State.DAY_FOUND, TokenKind.DAY): Transition(Action.ADD_DAY, State.DAY_FOUND),
    (State.DAY_FOUND, TokenKind.LINK): Transition(Action.ADD_DAY_LINK, State.DAY_LINK),
    (State.DAY_FOUND, TokenKind.HOUR): Transition(Action.SET_HOUR_FROM, State.HOUR_FROM),
    (State.DAY_FOUND, TokenKind.CLOSED): Transition(Action.RESET, State.START),
    (State.DAY_LINK, TokenKind.DAY): Transition(Action.ADD_DAY, State.DAY_FOUND),
    (State.HOUR_FROM, TokenKind.LINK): Transition(Action.ADD_HOUR_LINK, State.HOUR_LINK),
    (State.HOUR_LINK, TokenKind.HOUR): Transition(Action.SET_HOUR_TO, State.HOUR_TO),
    (State.HOUR_TO, TokenKind.DAY): Transition(Action.COMMIT_AND_START_GROUP, State.DAY_FOUND),
})


def transition(state: State, kind: TokenKind) -> Transition:
    """Look up the action and next state for a token in the given state."""
    return TRANSITIONS.get((state, kind), Transition(Action.IGNORE, state))


IgnoredTokenHook = Callable[[State, Token], None]


class Interpreter:
    """
    Drives the day and hour builders from a token sequence.

    Every run starts from State.START with fresh builders and a fresh
    Schedule, so a single Interpreter can be reused across lines.
    """

    def __init__(self, on_ignored: Optional[IgnoredTokenHook] = None):
        self.on_ignored = on_ignored
        self.state = State.START
        self.day_range = DayRangeBuilder()
        self.hour_range = HourRangeBuilder()
        self.schedule = Schedule()

    def reset(self) -> None:
        """Discard all state from a previous run."""
        self.state = State.START
        self.schedule = Schedule()
        self._reset_group()

    def run(self, tokens: Iterable[Token]) -> Schedule:
        """
        Interpret a complete token sequence.

        A group still in State.HOUR_TO at the end of input is committed;
        partial context in any other state is dropped.

        Raises:
            CanonicalizationError: If a day or hour token cannot be canonicalized
        """
        self.reset()

        for token in tokens:
            self.feed(token)

        if self.state is State.HOUR_TO:
            self._commit()

        return self.schedule

    def feed(self, token: Token) -> State:
        """Process a single token and return the resulting state."""
        step = transition(self.state, token.kind)

        if step.action is Action.IGNORE:
            logger.debug("Ignoring %s token [%s] in state %s", token.kind.value, token.text, self.state.value)
            if self.on_ignored is not None:
                self.on_ignored(self.state, token)
            return self.state

        self._apply(step.action, token)
        self.state = step.next_state
        return self.state

    def _apply(self, action: Action, token: Token) -> None:
        if action is Action.START_GROUP:
            self._reset_group()
            self.day_range.add_day(token)
        elif action is Action.ADD_DAY:
            self.day_range.add_day(token)
        elif action is Action.ADD_DAY_LINK:
            self.day_range.add_link(token)
        elif action is Action.SET_HOUR_FROM:
            self.hour_range.set_from(token)
        elif action is Action.ADD_HOUR_LINK:
            self.hour_range.add_link(token)
        elif action is Action.SET_HOUR_TO:
            self.hour_range.set_to(token)
        elif action is Action.RESET:
            self._reset_group()
        elif action is Action.COMMIT_AND_START_GROUP:
            self._commit()
            self._reset_group()
            self.day_range.add_day(token)

    def _reset_group(self) -> None:
        self.day_range = DayRangeBuilder()
        self.hour_range = HourRangeBuilder()

    def _commit(self) -> None:
        """Append the current hour range to every day in the current group."""
        if not self.hour_range.is_complete:
            return

        hour_range = self.hour_range.build()
        days = self.day_range.days()
        for day in days:
            self.schedule.append(day, hour_range)

        logger.debug("Committed [%s] to %s", hour_range, [day.value for day in days])


def interpret(tokens: Iterable[Token], on_ignored: Optional[IgnoredTokenHook] = None) -> Schedule:
    """Run a fresh Interpreter over a token sequence."""
    return Interpreter(on_ignored=on_ignored).run(tokens)
