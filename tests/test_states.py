"""
Tests for the menu, play and pause states.

These tests drive the states through a StateStack frame by frame with
explicit sets of held keys, the same way the driver does.
"""

import pytest
import numpy as np
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pygame

from config import Config
from src.game.context import GameContext
from src.game.entities import new_block
from src.game.menu import MenuOption, MenuState
from src.game.pause import PauseState
from src.game.play import PlayState, block_score
from src.game.registry import SoundName
from src.game.sprites import BLUE, HUGE, build_hearts_atlas, build_sprite_atlas
from src.game.state_stack import StateStack

DT = 1 / 60


def step(stack, keys=(), dt=DT):
    """Run one driver tick with `keys` held."""
    stack.ctx.begin_frame(keys)
    stack.update(dt)


def sound(stack, name):
    return stack.ctx.registry.get_sound(name)


@pytest.fixture
def stack(ctx):
    return StateStack(ctx)


@pytest.fixture
def play(stack):
    """A PlayState entered on the stack."""
    state = PlayState()
    stack.push(state)
    return state


@pytest.fixture
def tall_stack(loader):
    """Stack over a 432x480 playfield."""
    ctx = GameContext(
        config=Config(VIRTUAL_HEIGHT=480),
        loader=loader,
        atlas=build_sprite_atlas(pygame.Surface((256, 256))),
        hearts=build_hearts_atlas(pygame.Surface((20, 9))),
        rng=np.random.default_rng(7),
    )
    return StateStack(ctx)


class TestMenuState:
    """Test the start menu."""

    def test_enter_loads_assets(self, stack):
        stack.push(MenuState())
        registry = stack.ctx.registry
        assert SoundName.SELECT in registry.sounds
        assert SoundName.CONFIRM in registry.sounds
        assert 'background' in registry.images
        for key in ('title', 'start', 'start_selected', 'exit', 'exit_selected'):
            assert key in registry.texts

    def test_cursor_toggles_once_per_press(self, stack):
        menu = MenuState()
        stack.push(menu)
        step(stack, {pygame.K_DOWN})
        step(stack, {pygame.K_DOWN})
        assert menu.cursor is MenuOption.EXIT
        assert sound(stack, SoundName.SELECT).play.call_count == 1
        step(stack)
        step(stack, {pygame.K_UP})
        assert menu.cursor is MenuOption.START

    def test_start_transitions_to_play(self, stack):
        stack.push(MenuState())
        step(stack, {pygame.K_RETURN})
        assert isinstance(stack.top, PlayState)
        assert len(stack) == 1
        # menu assets were cleared and play assets loaded
        assert SoundName.SELECT not in stack.ctx.registry.sounds
        assert SoundName.MUSIC in stack.ctx.registry.sounds

    def test_exit_terminates(self, stack):
        stack.push(MenuState())
        step(stack, {pygame.K_DOWN})
        step(stack, {pygame.K_RETURN})
        assert not stack.running

    def test_q_terminates(self, stack):
        stack.push(MenuState())
        step(stack, {pygame.K_q})
        assert not stack.running

    def test_render(self, stack, canvas):
        stack.push(MenuState())
        stack.render(canvas)
        assert stack.running


class TestPlayEnter:
    """Test play state setup."""

    def test_entities_registered(self, stack, play):
        registry = stack.ctx.registry
        assert registry.get_object('paddle') is play.paddle
        assert registry.get_object('ball') is play.ball
        assert len(list(registry.iter_objects())) == len(play.blocks) + 2

    def test_values_registered(self, stack, play, config):
        registry = stack.ctx.registry
        assert registry.get_value('score') == 0
        assert registry.get_value('health') == config.INITIAL_HEALTH
        assert registry.get_value('level') == 1

    def test_music_starts(self, stack, play):
        sound(stack, SoundName.MUSIC).play_bgm.assert_called_once()

    def test_ball_starts_inert_above_paddle(self, play):
        assert play.ball.is_inert
        assert play.ball.y + play.ball.height == play.paddle.y


class TestPlayUpdate:
    """Test the per-frame play loop."""

    def test_space_launches_inert_ball(self, stack, play, config):
        step(stack, {pygame.K_SPACE})
        assert -config.BALL_LAUNCH_DX <= play.ball.dx <= config.BALL_LAUNCH_DX
        assert -config.BALL_LAUNCH_DY_MAX <= play.ball.dy <= -config.BALL_LAUNCH_DY_MIN

    def test_space_does_not_relaunch_moving_ball(self, stack, play):
        play.ball.x, play.ball.y = 200, 150
        play.ball.dx, play.ball.dy = 5.0, -5.0
        step(stack, {pygame.K_SPACE})
        assert (play.ball.dx, play.ball.dy) == (5.0, -5.0)

    def test_paddle_moves_with_arrow_keys(self, stack, play, config):
        x = play.paddle.x
        step(stack, {pygame.K_LEFT})
        assert play.paddle.x == pytest.approx(x - config.PADDLE_SPEED * DT)

    def test_wall_hit_plays_sound(self, stack, play):
        play.ball.x, play.ball.y = -1, 150
        play.ball.dx, play.ball.dy = -100.0, 0.0
        step(stack)
        assert play.ball.dx == 100.0
        sound(stack, SoundName.WALL_HIT).play_once.assert_called_once()

    def test_paddle_bounce(self, stack, play):
        paddle, ball = play.paddle, play.ball
        ball.x, ball.y = paddle.x + 16, paddle.y - 6
        ball.dx, ball.dy = 0.0, 50.0
        step(stack)
        assert ball.dy == -50.0
        sound(stack, SoundName.PADDLE_HIT).play_once.assert_called_once()

    def test_no_paddle_bounce_when_moving_up(self, stack, play):
        paddle, ball = play.paddle, play.ball
        ball.x, ball.y = paddle.x + 16, paddle.y - 6
        ball.dx, ball.dy = 0.0, -50.0
        step(stack)
        assert ball.dy == -50.0
        sound(stack, SoundName.PADDLE_HIT).play_once.assert_not_called()

    def test_block_hit(self, stack, play):
        """A hit block leaves play, scores once and bounces the ball."""
        target = new_block(100, 50, color=2, tier=1)
        spare = new_block(300, 16)
        play.blocks = [target, spare]
        ball = play.ball
        ball.x, ball.y = 110, 60
        ball.dx, ball.dy = 0.0, -50.0

        step(stack)
        assert not target.inplay
        assert spare.inplay
        assert play.score == block_score(target) == 250
        assert ball.dy == 50.0
        assert sound(stack, SoundName.BRICK_HIT).play.call_count == 1
        assert stack.ctx.registry.get_value('score') == 250

        # Still overlapping, but the destroyed block is ignored
        ball.y = 60
        step(stack)
        assert play.score == 250
        assert sound(stack, SoundName.BRICK_HIT).play.call_count == 1

    def test_hit_block_direction_rules(self, stack, play):
        block = new_block(100, 50)
        ball = play.ball
        ball.x, ball.y = 95, 45
        ball.dx, ball.dy = -10.0, 10.0
        assert play.hit_block(stack.ctx, block)
        # LEFT | BOTTOM: dy flips (moving down), dx flips (moving left)
        assert (ball.dx, ball.dy) == (10.0, -10.0)

    def test_hit_block_aligned_x_keeps_dx(self, stack, play):
        """Equal x sets neither LEFT nor RIGHT, so only dy reverses."""
        block = new_block(100, 50)
        ball = play.ball
        ball.x, ball.y = 100, 60
        ball.dx, ball.dy = 30.0, -50.0
        assert play.hit_block(stack.ctx, block)
        assert (ball.dx, ball.dy) == (30.0, 50.0)

    def test_hit_block_miss(self, stack, play):
        block = new_block(300, 16)
        play.ball.x, play.ball.y = 10, 150
        assert not play.hit_block(stack.ctx, block)
        assert block.inplay

    def test_level_clear(self, stack, play):
        for block in play.blocks:
            block.inplay = False
        play.ball.x, play.ball.dx = 50, 20.0
        step(stack)
        assert play.level == 2
        assert play.blocks and all(block.inplay for block in play.blocks)
        assert play.ball.is_inert
        sound(stack, SoundName.VICTORY).play.assert_called_once()
        assert stack.ctx.registry.get_value('level') == 2

    def test_digit_keys_change_paddle(self, stack, play):
        step(stack, {pygame.K_1})
        assert play.paddle.color == BLUE
        step(stack, {pygame.K_8})
        assert play.paddle.size == HUGE
        assert play.paddle.width == 128

    def test_x_quits(self, stack, play):
        step(stack, {pygame.K_x})
        assert not stack.running
        # exit stopped every sound before clearing the registry
        assert not stack.ctx.registry.sounds

    def test_render(self, stack, play, canvas):
        stack.render(canvas)
        assert stack.top is play


class TestFalling:
    """Test losing the ball past the bottom edge."""

    def test_fall_costs_health_and_resets_ball(self, tall_stack):
        play = PlayState()
        tall_stack.push(play)
        spawn = play.ball.spawn
        play.ball.x, play.ball.y = 160, 440
        play.ball.dx, play.ball.dy = 0.0, 41.0

        # one second later the ball is at y=481
        step(tall_stack, dt=1.0)
        assert play.health == 2
        assert (play.ball.x, play.ball.y) == spawn
        assert play.ball.is_inert
        sound(tall_stack, SoundName.HURT).play.assert_called_once()
        # the bottom edge counts as a wall before the reset
        sound(tall_stack, SoundName.WALL_HIT).play_once.assert_called_once()
        assert tall_stack.ctx.registry.get_value('health') == 2

    def test_last_life_returns_to_menu(self, tall_stack):
        play = PlayState(health=1)
        tall_stack.push(play)
        play.ball.y, play.ball.dy = 481, 10.0

        step(tall_stack)
        assert isinstance(tall_stack.top, MenuState)
        assert len(tall_stack) == 1


class TestPause:
    """Test pausing play."""

    def test_p_freezes_play_until_return(self, stack, play):
        step(stack, {pygame.K_SPACE})
        step(stack)
        position = (play.ball.x, play.ball.y, play.paddle.x)

        step(stack, {pygame.K_p})
        assert isinstance(stack.top, PauseState)
        for _ in range(10):
            step(stack, {pygame.K_LEFT})
        assert (play.ball.x, play.ball.y, play.paddle.x) == position

        step(stack, {pygame.K_RETURN})
        assert stack.top is play
        step(stack)
        assert (play.ball.x, play.ball.y) != position[:2]

    def test_sounds_pause_and_resume(self, stack, play):
        step(stack, {pygame.K_p})
        music = sound(stack, SoundName.MUSIC)
        music.pause.assert_called_once()
        sound(stack, SoundName.PAUSE).play.assert_called_once()
        music.resume.assert_not_called()

        step(stack, {pygame.K_RETURN})
        music.resume.assert_called_once()

    def test_pause_keeps_play_resources(self, stack, play):
        step(stack, {pygame.K_p})
        assert stack.ctx.registry.get_object('ball') is play.ball

    def test_render_frozen_scene(self, stack, play, canvas):
        step(stack, {pygame.K_p})
        stack.render(canvas)
        assert isinstance(stack.top, PauseState)
