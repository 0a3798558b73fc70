"""
Tests for the state stack.

These tests verify:
    - Push/pop/transition semantics and lifecycle hooks
    - Only the top state is updated and rendered
    - Results are applied after the state body returns
    - Popping the last state terminates
"""

import pytest
import sys
import os
from typing import List, Optional

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pygame

from src.game.base_state import BaseState, StateAction, StateResult
from src.game.state_stack import StateStack


class RecordingState(BaseState):
    """State that logs its hooks and returns a scripted result."""

    def __init__(self, label: str, log: List[str], result: Optional[StateResult] = None):
        self.label = label
        self.log = log
        self.result = result or StateResult.noop()
        self.render_result = StateResult.noop()

    def enter(self, ctx):
        self.log.append(f"{self.label}.enter")

    def exit(self, ctx):
        self.log.append(f"{self.label}.exit")

    def update(self, ctx, dt):
        self.log.append(f"{self.label}.update")
        result, self.result = self.result, StateResult.noop()
        return result

    def render(self, ctx, renderer):
        self.log.append(f"{self.label}.render")
        assert renderer.bound is not None
        return self.render_result


@pytest.fixture
def log():
    return []


@pytest.fixture
def stack(ctx):
    return StateStack(ctx)


class TestStateResult:
    """Test result construction."""

    def test_helpers(self, log):
        state = RecordingState('a', log)
        assert StateResult.push(state).action is StateAction.PUSH
        assert StateResult.transition(state).state is state
        assert StateResult.pop().action is StateAction.POP
        assert StateResult.noop().action is StateAction.NOOP

    def test_push_requires_state(self):
        with pytest.raises(AssertionError):
            StateResult(StateAction.PUSH)

    def test_pop_takes_no_state(self, log):
        with pytest.raises(AssertionError):
            StateResult(StateAction.POP, RecordingState('a', log))


class TestStackOperations:
    """Test direct stack operations."""

    def test_empty_stack_is_not_running(self, stack):
        assert not stack.running
        assert stack.top is None
        assert stack.pop() is None

    def test_push_enters(self, stack, log):
        a = RecordingState('a', log)
        stack.push(a)
        assert stack.top is a
        assert log == ['a.enter']

    def test_push_suspends_without_exit(self, stack, log):
        stack.push(RecordingState('a', log))
        stack.push(RecordingState('b', log))
        assert log == ['a.enter', 'b.enter']
        assert len(stack) == 2

    def test_pop_exits_and_resumes_lower(self, stack, log):
        a = RecordingState('a', log)
        stack.push(a)
        stack.push(RecordingState('b', log))
        stack.pop()
        assert stack.top is a
        assert log[-1] == 'b.exit'
        assert 'a.exit' not in log

    def test_pop_last_terminates(self, stack, log):
        stack.push(RecordingState('a', log))
        stack.pop()
        assert not stack.running

    def test_transition_replaces_top(self, stack, log):
        stack.push(RecordingState('a', log))
        b = RecordingState('b', log)
        stack.transition(b)
        assert stack.top is b
        assert len(stack) == 1
        assert log == ['a.enter', 'a.exit', 'b.enter']


class TestDispatch:
    """Test update/render dispatch and result application."""

    def test_only_top_is_updated(self, stack, log):
        stack.push(RecordingState('a', log))
        stack.push(RecordingState('b', log))
        log.clear()
        stack.update(0.016)
        assert log == ['b.update']

    def test_only_top_is_rendered(self, stack, log, canvas):
        stack.push(RecordingState('a', log))
        stack.push(RecordingState('b', log))
        log.clear()
        stack.render(canvas)
        assert log == ['b.render']

    def test_render_target_released(self, stack, log, canvas):
        stack.push(RecordingState('a', log))
        stack.render(canvas)
        assert stack.ctx.renderer.bound is None

    def test_push_result_applied_after_update(self, stack, log):
        b = RecordingState('b', log)
        stack.push(RecordingState('a', log, StateResult.push(b)))
        log.clear()
        stack.update(0.016)
        assert log == ['a.update', 'b.enter']
        assert stack.top is b

    def test_pop_result_terminates_single_state(self, stack, log):
        stack.push(RecordingState('a', log, StateResult.pop()))
        stack.update(0.016)
        assert not stack.running
        assert log[-1] == 'a.exit'

    def test_transition_result(self, stack, log):
        b = RecordingState('b', log)
        stack.push(RecordingState('a', log, StateResult.transition(b)))
        stack.update(0.016)
        assert stack.top is b
        assert len(stack) == 1

    def test_render_result_applied(self, stack, log, canvas):
        a = RecordingState('a', log)
        a.render_result = StateResult.pop()
        stack.push(a)
        stack.render(canvas)
        assert not stack.running

    def test_update_on_empty_stack_is_noop(self, stack):
        stack.update(0.016)
        stack.render(pygame.Surface((4, 4)))
        assert not stack.running
