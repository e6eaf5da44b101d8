#!/usr/bin/env python3

"""
Gameplay State

A deliberately tiny game: a target number moves down every second, and the
player scores by pressing 'select' while the highlighted number matches it.
Reaching the target score replaces the game with a results screen.

    * 'pause' pushes the pause menu on top of the game
    * 'back' abandons the game and returns to the menu beneath
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .base import State
from .pause import Pause
from ..constants import (
    ACTION_UP, ACTION_DOWN, ACTION_SELECT, ACTION_BACK, ACTION_PAUSE, COLOUR_WHITE, COLOUR_GREY, COLOUR_GREEN,
    COLOUR_RED, COLOUR_YELLOW, GAME_TARGET_SCORE, TEXT_CELL_WIDTH, TEXT_CELL_HEIGHT
)
from ..signals import Push, Pop, Replace, Clear

NUMBER_COUNT = 10
TICKS_PER_MOVE = 60
GAME_LEFT = TEXT_CELL_WIDTH * 4


class Game(State):
    def __init__(self, renderer=None, inputs=None, target_score=GAME_TARGET_SCORE):
        super().__init__(renderer, inputs)
        self.target_score = target_score
        self.score = 0
        self.misses = 0
        self.cursor = 0
        self.target = 0
        self.ticks = 0

    def enter(self):
        self.score = 0
        self.misses = 0
        self.cursor = 0
        self.target = NUMBER_COUNT // 2
        self.ticks = 0
        return []

    def update(self):
        quit_program, actions = self.read_inputs()

        if quit_program:
            return [Clear()]

        for action in actions:
            if action == ACTION_PAUSE:
                return [Push(Pause(self.renderer, self.inputs))]

            if action == ACTION_BACK:
                return [Pop()]

            if action == ACTION_UP:
                self.cursor = (self.cursor - 1) % NUMBER_COUNT
            elif action == ACTION_DOWN:
                self.cursor = (self.cursor + 1) % NUMBER_COUNT
            elif action == ACTION_SELECT:
                if self.cursor == self.target:
                    self.score += 1
                    self._move_target()
                else:
                    self.misses += 1

        if self.score >= self.target_score:
            return [Replace(Results(self.renderer, self.inputs, self.score, self.misses))]

        self.ticks += 1

        if self.ticks >= TICKS_PER_MOVE:
            self._move_target()

        return []

    def draw(self):
        self.renderer.draw_text(
            "Score {}/{}  Misses {}".format(self.score, self.target_score, self.misses),
            (GAME_LEFT, TEXT_CELL_HEIGHT * 2), COLOUR_GREEN
        )

        for number in range(NUMBER_COUNT):
            if number == self.target:
                colour = COLOUR_YELLOW if number == self.cursor else COLOUR_RED
            else:
                colour = COLOUR_WHITE if number == self.cursor else COLOUR_GREY

            marker = ">" if number == self.cursor else " "
            self.renderer.draw_text(
                "{} {}".format(marker, number), (GAME_LEFT, TEXT_CELL_HEIGHT * (4 + number)), colour
            )

    def _move_target(self):
        self.ticks = 0
        self.target = (self.target + 3) % NUMBER_COUNT


class Results(State):
    def __init__(self, renderer=None, inputs=None, score=0, misses=0):
        super().__init__(renderer, inputs)
        self.score = score
        self.misses = misses

    def update(self):
        quit_program, actions = self.read_inputs()

        if quit_program:
            return [Clear()]

        if ACTION_SELECT in actions or ACTION_BACK in actions:
            return [Pop()]

        return []

    def draw(self):
        self.renderer.draw_text("Well done!", (GAME_LEFT, TEXT_CELL_HEIGHT * 2), COLOUR_GREEN)
        self.renderer.draw_text(
            "Scored {} with {} misses".format(self.score, self.misses), (GAME_LEFT, TEXT_CELL_HEIGHT * 4), COLOUR_WHITE
        )
        self.renderer.draw_text("Press select to continue", (GAME_LEFT, TEXT_CELL_HEIGHT * 6), COLOUR_GREY)
