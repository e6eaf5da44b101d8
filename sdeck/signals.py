#!/usr/bin/env python3

"""
Stack Signals

States never touch the state stack directly.  Instead, their 'enter' and
'update' methods return a sequence of signals, and the stack applies them in
order once the state has returned control:

    * Push(state)    - Put a new state on top, which becomes active
    * Pop()          - Remove the active state, exposing the one beneath
    * Replace(state) - Pop the active state, then push a new one
    * Clear()        - Remove every state, ending the application loop
    * NoTransition() - Explicitly request nothing

Signals are immutable once created, and are not kept beyond the frame that
produced them.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class SignalError(Exception):
    pass


class Signal:
    __slots__ = ()

    def __setattr__(self, name, value):
        raise SignalError("Signals cannot be modified")

    def __delattr__(self, name):
        raise SignalError("Signals cannot be modified")

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return "{}()".format(type(self).__name__)


class _StateSignal(Signal):
    # Base for signals carrying a new state
    __slots__ = ("state",)

    def __init__(self, state):
        if state is None:
            raise SignalError("{} requires a state".format(type(self).__name__))

        object.__setattr__(self, "state", state)

    def __eq__(self, other):
        # States have no value equality, so the same signal must carry the very same state
        return type(self) is type(other) and self.state is other.state

    def __hash__(self):
        return hash((type(self), id(self.state)))

    def __repr__(self):
        return "{}({})".format(type(self).__name__, getattr(self.state, "name", repr(self.state)))


class Push(_StateSignal):
    __slots__ = ()


class Replace(_StateSignal):
    __slots__ = ()


class Pop(Signal):
    __slots__ = ()


class Clear(Signal):
    __slots__ = ()


class NoTransition(Signal):
    __slots__ = ()


def normalise(signals):
    """
    Turn whatever a state returned into a list of real transitions.

    'None' and 'NoTransition' markers both mean nothing was requested, so they
    are dropped here, and the loop only needs to check for an empty list.
    """
    if signals is None:
        return []

    if isinstance(signals, Signal):
        raise SignalError("States must return a sequence of signals, not a single {!r}".format(signals))

    try:
        signals = iter(signals)
    except TypeError:
        raise SignalError("States must return a sequence of signals, not {!r}".format(signals)) from None

    normalised = []

    for signal in signals:
        if not isinstance(signal, Signal):
            raise SignalError("Not a signal: {!r}".format(signal))

        if not isinstance(signal, NoTransition):
            normalised.append(signal)

    return normalised
