#!/usr/bin/env python3

"""
State Stack

Holds every live state, with the topmost state being the only active one.  The
stack owns its states: once pushed, nothing else should keep hold of them.

Each state is wrapped in a small node which remembers whether its 'enter'
method has run yet.  Calling 'start' enters every state that hasn't been
entered, from the bottom up, so a chain of states pushed during entry is fully
resolved before anything is drawn or updated.

The stack is only restructured by applying signals returned by the states
themselves.  Pop on an empty stack is a programming error, so it raises
StackError rather than being ignored.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .signals import SignalError, Push, Pop, Replace, Clear, NoTransition, normalise


class StackError(Exception):
    pass


class StateNode:
    __slots__ = ("state", "is_started", "is_revealed")

    def __init__(self, state):
        self.state = state
        self.is_started = False
        self.is_revealed = False  # Waiting to be entered again after a pop exposed it


class StateStack:
    def __init__(self, size=None, reenter_on_reveal=False, debugger=None):
        self.nodes = []
        self.size = size  # 'None' allows unlimited depth
        self.reenter_on_reveal = reenter_on_reveal
        self.debugger = debugger

        # Dispatch signals on a fast dictionary lookup, rather than a chain of type checks
        self.signal_methods = {
            Push:         self._apply_push,
            Pop:          self._apply_pop,
            Replace:      self._apply_replace,
            Clear:        self._apply_clear,
            NoTransition: self._apply_nothing
        }

    def __len__(self):
        return len(self.nodes)

    def is_empty(self):
        return not self.nodes

    def top(self):
        try:
            return self.nodes[-1].state
        except IndexError:
            raise StackError("Stack underflow") from None

    def push(self, state):
        if self.size is not None and len(self.nodes) >= self.size:
            raise StackError("Stack overflow")

        self._trace("Pushing state '{}'", state)

        if self.nodes and self.nodes[-1].is_revealed:
            # Covered again before it could be re-entered, so it is no longer due an entry
            below = self.nodes[-1]
            below.is_started = True
            below.is_revealed = False

        self.nodes.append(StateNode(state))
        state.on_pushed()

    def pop(self):
        try:
            node = self.nodes.pop()
        except IndexError:
            raise StackError("Stack underflow") from None

        self._trace("Popping state '{}'", node.state)
        node.state.on_popped()

        if self.reenter_on_reveal and self.nodes:
            # The revealed state will have 'enter' called again on the next start, if it is still on top
            revealed = self.nodes[-1]
            revealed.is_started = False
            revealed.is_revealed = True

    def replace(self, state):
        if not self.nodes:
            raise StackError("Stack underflow")

        # Release the old top before the new state can be entered, and don't reveal what lies beneath
        node = self.nodes.pop()
        self._trace("Popping state '{}'", node.state)
        node.state.on_popped()
        self.push(state)

    def clear(self):
        if self.nodes and self.debugger is not None and self.debugger.is_live():
            self.debugger.output("Clearing {} state(s)".format(len(self.nodes)))

        # Release from the top down, as with a series of pops
        while self.nodes:
            node = self.nodes.pop()
            self._trace("Popping state '{}'", node.state)
            node.state.on_popped()

    def start(self):
        signals = []

        # Iterate over a snapshot, as nothing restructures the stack until the signals are processed
        for node in tuple(self.nodes):
            if node.is_started:
                continue

            self._trace("Starting state '{}'", node.state)
            node.is_started = True
            node.is_revealed = False
            signals.extend(normalise(node.state.enter()))

        return signals

    def draw(self):
        # Only the topmost state is drawn.  Overlaid drawing of states beneath would need a per-state flag, and
        # a walk back down the stack until the first state which isn't overlaid.
        self.top().draw()

    def update(self):
        return normalise(self.top().update())

    def process_signals(self, signals):
        for signal in signals:
            signal_method = self.signal_methods.get(type(signal))

            if signal_method is None:
                raise SignalError("Unsupported signal: {!r}".format(signal))

            if signal_method(signal):
                # The stack has been cleared, so there is nothing left to apply the remaining signals to
                break

    def shutdown(self):
        # Release every state on process exit.  Safe to call more than once
        self.clear()

    def get_items(self):
        # For debugging, bottom of the stack first
        return [node.state for node in self.nodes]

    def get_started_flags(self):
        # For debugging, in the same order as 'get_items'
        return [node.is_started for node in self.nodes]

    def _apply_push(self, signal):
        self.push(signal.state)

    def _apply_pop(self, _):
        self.pop()

    def _apply_replace(self, signal):
        self.replace(signal.state)

    def _apply_clear(self, _):
        self.clear()
        return True

    def _apply_nothing(self, _):
        pass

    def _trace(self, message, state):
        if self.debugger is not None and self.debugger.is_live():
            self.debugger.output(message.format(state.name))
