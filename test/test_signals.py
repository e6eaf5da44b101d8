#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from sdeck.signals import SignalError, Push, Pop, Replace, Clear, NoTransition, normalise
from sdeck.states.base import State


class TestSignals(unittest.TestCase):
    def setUp(self):
        self.state = State()

    def test_signals_immutable(self):
        push = Push(self.state)
        self.assertIs(self.state, push.state)
        self.assertRaises(SignalError, setattr, push, "state", State())
        self.assertRaises(SignalError, setattr, Pop(), "state", self.state)
        self.assertRaises(SignalError, delattr, push, "state")

    def test_signals_require_state(self):
        self.assertRaises(SignalError, Push, None)
        self.assertRaises(SignalError, Replace, None)

    def test_signals_equality(self):
        self.assertEqual(Pop(), Pop())
        self.assertNotEqual(Pop(), Clear())
        self.assertEqual(Push(self.state), Push(self.state))
        self.assertNotEqual(Push(self.state), Replace(self.state))
        self.assertNotEqual(Push(self.state), Push(State()))

    def test_signals_repr(self):
        self.assertEqual("Pop()", repr(Pop()))
        self.assertEqual("Push(State)", repr(Push(self.state)))

    def test_normalise_none(self):
        self.assertEqual([], normalise(None))
        self.assertEqual([], normalise([]))

    def test_normalise_drops_no_transition(self):
        self.assertEqual([], normalise([NoTransition()]))
        self.assertEqual([Pop(), Clear()], normalise((NoTransition(), Pop(), NoTransition(), Clear())))

    def test_normalise_rejects_bad_values(self):
        self.assertRaises(SignalError, normalise, Pop())
        self.assertRaises(SignalError, normalise, [Pop(), "Pop"])
        self.assertRaises(SignalError, normalise, [self.state])
        self.assertRaises(SignalError, normalise, 5)
        self.assertRaises(SignalError, normalise, object())
