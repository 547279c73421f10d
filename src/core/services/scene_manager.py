"""
scene_manager.py
----------------
Single-slot scene lifecycle.

Owns at most one live scene and serializes switches with a boolean gate:
a switch requested while another is in progress is rejected, not queued.
The gate is taken when switch_to() / request_switch() is called, not when
the returned coroutine or task first runs.

Switch order (no overlap between scenes):
    old.exit() → host.detach(old) → old.destroy()
    construct new → host.attach(new) → new.enter()

Between detach and attach the host has zero scenes and input is dropped.
A failing hook never leaves the slot stuck: the gate is always released
and the slot falls back to IDLE with every touched scene destroyed.
Hooks have no timeout; one that never resolves holds the gate until
shutdown() cancels it.
"""

import asyncio
from typing import Awaitable, Callable, Optional

from src.core.debug.debug_logger import DebugLogger
from src.scenes.scene_state import LifecycleState, SwitchResult


SceneFactory = Callable[[], object]


async def _resolved(result: SwitchResult) -> SwitchResult:
    return result


class SceneManager:
    """Coordinates scene switches and forwards input and frame ticks."""

    def __init__(self, host):
        """
        Args:
            host: Object with attach(scene) and detach(scene)
        """
        self.host = host
        self._state = LifecycleState.IDLE
        self._current = None      # Entered scene, or the one being entered/exited
        self._attached = None     # Scene currently attached to the host
        self._switch_task: Optional[asyncio.Task] = None
        self._closed = False
        DebugLogger.init_entry("SceneManager")

    # ===========================================================
    # State
    # ===========================================================

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def is_transitioning(self) -> bool:
        return self._state is LifecycleState.TRANSITIONING

    @property
    def current_scene(self):
        """The active scene, or None when idle or mid-switch."""
        if self._state is LifecycleState.ACTIVE:
            return self._current
        return None

    # ===========================================================
    # Scene Control
    # ===========================================================

    def switch_to(self, construct_fn: SceneFactory) -> Awaitable[SwitchResult]:
        """
        Replace the active scene with construct_fn().

        The gate is checked and taken synchronously, so two calls made
        back to back are serialized even if neither result is awaited yet.
        A taken gate is held until the returned coroutine is awaited.

        Returns:
            Awaitable resolving to SUCCESS, REJECTED (switch already in
            progress or manager shut down), or FAILED
        """
        if not self._try_begin():
            return _resolved(SwitchResult.REJECTED)
        return self._perform_switch(construct_fn)

    def request_switch(self, construct_fn: SceneFactory) -> Optional[asyncio.Task]:
        """
        Synchronous form of switch_to() for key and frame handlers.

        Returns:
            Task resolving to the SwitchResult, or None if rejected

        Raises:
            RuntimeError: no asyncio loop is running (the gate is left untouched)
        """
        loop = asyncio.get_running_loop()
        if not self._try_begin():
            return None
        task = loop.create_task(self._perform_switch(construct_fn))
        self._switch_task = task
        return task

    def _try_begin(self) -> bool:
        if self._closed:
            DebugLogger.warn("Scene manager is shut down", category="scene")
            return False
        if self._state is LifecycleState.TRANSITIONING:
            DebugLogger.warn("Scene transition already in progress", category="scene")
            return False
        self._state = LifecycleState.TRANSITIONING
        return True

    async def _perform_switch(self, construct_fn: SceneFactory) -> SwitchResult:
        self._switch_task = asyncio.current_task()
        old_scene = self._current
        new_scene = None
        stage = "exit"

        try:
            if self._closed:
                return SwitchResult.REJECTED

            if old_scene is not None:
                DebugLogger.state(f"Exiting {_scene_name(old_scene)}", category="scene")
                try:
                    await old_scene.exit()
                finally:
                    self._release(old_scene)

            stage = "construct"
            new_scene = construct_fn()
            self._current = new_scene
            self.host.attach(new_scene)
            self._attached = new_scene

            stage = "enter"
            DebugLogger.state(f"Entering {_scene_name(new_scene)}", category="scene")
            await new_scene.enter()

            self._state = LifecycleState.ACTIVE
            DebugLogger.state(f"Active scene: {_scene_name(new_scene)}", category="scene")
            return SwitchResult.SUCCESS

        except Exception as e:
            DebugLogger.fail(f"Error during scene transition ({stage}): {e!r}", category="scene")
            if new_scene is not None:
                self._release(new_scene)
            self._state = LifecycleState.IDLE
            return SwitchResult.FAILED

        finally:
            if self._state is LifecycleState.TRANSITIONING:
                # Cancelled mid-hook or rejected after shutdown
                if self._current is not None:
                    self._release(self._current)
                self._state = LifecycleState.IDLE
            if self._switch_task is asyncio.current_task():
                self._switch_task = None

    def _release(self, scene):
        """Detach (if attached) and destroy a scene; clear references to it."""
        if self._attached is scene:
            self.host.detach(scene)
            self._attached = None
        if self._current is scene:
            self._current = None
        try:
            scene.destroy()
        except Exception as e:
            DebugLogger.fail(f"{_scene_name(scene)}.destroy() raised: {e!r}", category="scene")

    async def shutdown(self):
        """
        Stop accepting switches, cancel one in flight, and release the
        active scene. Used when the host closes.
        """
        self._closed = True

        task = self._switch_task
        if task is not None and task is not asyncio.current_task() and not task.done():
            DebugLogger.state("Cancelling scene switch for shutdown", category="scene")
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        scene = self.current_scene
        if scene is not None:
            self._state = LifecycleState.TRANSITIONING
            try:
                await scene.exit()
            except Exception as e:
                DebugLogger.fail(f"Error exiting {_scene_name(scene)} on shutdown: {e!r}", category="scene")

        if self._current is not None:
            self._release(self._current)
        self._state = LifecycleState.IDLE

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch_key_down(self, code: str):
        """Forward to the active scene's handle_key_down, if any."""
        handler = getattr(self.current_scene, "handle_key_down", None)
        if handler is not None:
            handler(code)

    def dispatch_key_up(self, code: str):
        handler = getattr(self.current_scene, "handle_key_up", None)
        if handler is not None:
            handler(code)

    def dispatch_frame(self, dt: float):
        """
        Forward a frame tick to the attached scene's update, if any.

        Ticks reach a scene while its enter/exit hooks run so animated
        hooks can progress; nothing is forwarded while no scene is attached.
        """
        handler = getattr(self._attached, "update", None)
        if handler is not None:
            handler(dt)

    @property
    def attached_scene(self):
        return self._attached


def _scene_name(scene) -> str:
    return getattr(scene, "name", scene.__class__.__name__)
