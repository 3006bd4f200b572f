"""Simulation controller: tick loop, collision detection and lifecycle."""

import logging
from typing import Callable, List, Optional, Tuple
import numpy as np
from gravity_sim.physics.body import Body, BodySnapshot
from gravity_sim.physics.forces import get_update_scheme
from gravity_sim.physics.numerics import collision_threshold
from gravity_sim.io.parameters import ParameterSource
from gravity_sim.render.base import Renderer
from gravity_sim.scheduling.base import Scheduler, ScheduledTask

logger = logging.getLogger(__name__)

Listener = Callable[["Simulation"], None]


class Simulation:
    """Owns a fixed collection of bodies and advances it one tick at a time.

    State machine is Stopped -> Running -> Stopped. A collision detected
    at the end of a tick stops the simulation and notifies collision
    listeners; it is never retried.
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        scheduler: Optional[Scheduler] = None,
        parameter_source: Optional[ParameterSource] = None,
        scheme: str = "sequential",
        tick_rate: float = 60.0
    ):
        """Initialize simulation.

        Args:
            renderer: Optional renderer notified after every tick, add and reset
            scheduler: Optional scheduler used by start() to drive tick()
            parameter_source: Source of reset values, required by reset()
            scheme: Update scheme name ('sequential' or 'snapshot')
            tick_rate: Ticks per second requested from the scheduler
        """
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")
        self.renderer = renderer
        self.scheduler = scheduler
        self.parameter_source = parameter_source
        self.scheme = scheme
        self._update = get_update_scheme(scheme)
        self.tick_rate = tick_rate

        self._bodies: List[Body] = []
        self._running = False
        self._task: Optional[ScheduledTask] = None
        self.tick_count = 0

        self._tick_listeners: List[Listener] = []
        self._collision_listeners: List[Listener] = []

    @classmethod
    def from_config(cls, config, **kwargs) -> "Simulation":
        """Build a simulation with one body per configured body.

        Args:
            config: Config object
            **kwargs: Extra arguments for the constructor (renderer, scheduler)

        Returns:
            Simulation in the stopped state
        """
        kwargs.setdefault("parameter_source", config.parameter_source())
        kwargs.setdefault("scheme", config.scheme)
        kwargs.setdefault("tick_rate", config.tick_rate)
        sim = cls(**kwargs)
        for body_config in config.bodies:
            params = body_config.params
            sim.add_body(Body(
                params.x, params.y, params.radius, body_config.color,
                params.velocity, name=body_config.name,
            ))
        return sim

    @property
    def bodies(self) -> Tuple[Body, ...]:
        """Owned bodies in insertion order.

        The tuple is a copy but the bodies are live. Observers such as
        listeners and renderers should use :meth:`snapshots` instead.
        """
        return tuple(self._bodies)

    def snapshots(self) -> Tuple[BodySnapshot, ...]:
        """Immutable copies of every body in insertion order."""
        return tuple(body.snapshot() for body in self._bodies)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def period(self) -> float:
        """Seconds between scheduled ticks."""
        return 1.0 / self.tick_rate

    def on_tick(self, callback: Listener) -> Listener:
        """Subscribe to completed ticks."""
        self._tick_listeners.append(callback)
        return callback

    def on_collision(self, callback: Listener) -> Listener:
        """Subscribe to the collision that stops the simulation."""
        self._collision_listeners.append(callback)
        return callback

    def add_body(self, body: Body):
        """Append a body and draw it.

        Unnamed bodies get the first free ``circleN`` name. Names must be
        unique because reset() looks parameters up by name.
        """
        names = {b.name for b in self._bodies}
        if any(b is body for b in self._bodies):
            raise ValueError(f"Body {body.name!r} was already added")
        if body.name is None:
            n = len(self._bodies) + 1
            while f"circle{n}" in names:
                n += 1
            body.name = f"circle{n}"
        elif body.name in names:
            raise ValueError(f"Duplicate body name: {body.name!r}")
        self._bodies.append(body)
        if self.renderer is not None:
            self.renderer.draw_body(body.snapshot())
            self.renderer.present()

    def find_collision(self) -> Optional[Tuple[int, int]]:
        """Return the first colliding pair (i, j), i < j, or None.

        Pairs are enumerated by ascending i then ascending j.
        """
        bodies = self._bodies
        for i in range(len(bodies)):
            for j in range(i + 1, len(bodies)):
                distance = bodies[i].distance_to(bodies[j])
                threshold = collision_threshold(bodies[i].radius, bodies[j].radius)
                if distance < threshold:
                    logger.debug(
                        "Bodies %s and %s at distance %s (threshold %s)",
                        bodies[i].name, bodies[j].name, distance, threshold,
                    )
                    return i, j
        return None

    def check_collision(self) -> bool:
        """True if any pair of bodies is closer than its collision threshold."""
        return self.find_collision() is not None

    def tick(self) -> bool:
        """Advance all bodies by one unit step.

        Returns:
            True if the tick ran, False if the simulation is stopped
        """
        if not self._running:
            return False

        self._update(self._bodies)
        self._draw_all()
        self.tick_count += 1

        for listener in list(self._tick_listeners):
            listener(self)

        pair = self.find_collision()
        if pair is not None:
            self._halt()
            i, j = pair
            logger.info(
                "Collision detected between %s and %s after %d ticks. Simulation stopped.",
                self._bodies[i].name, self._bodies[j].name, self.tick_count,
            )
            for listener in list(self._collision_listeners):
                listener(self)
        return True

    def _scheduled_tick(self):
        # Cooperative cancellation: the flag is checked before each scheduled run
        if not self._running:
            self._cancel_task()
            return
        self.tick()

    def start(self):
        """Enter the running state and schedule periodic ticks."""
        if self._running and self._task is not None:
            return
        self._running = True
        logger.debug("Simulation started at %s ticks/s", self.tick_rate)
        if self.scheduler is not None and self._task is None:
            self._task = self.scheduler.schedule_interval(self._scheduled_tick, self.period)

    def stop(self):
        """Stop ticking. Bodies keep their current state."""
        if self._running:
            logger.debug("Simulation stopped after %d ticks", self.tick_count)
        self._halt()

    def reset(self):
        """Stop and overwrite every body from the parameter source.

        The number of bodies never changes.
        """
        if self.parameter_source is None:
            raise RuntimeError("Cannot reset: no parameter source attached")
        self._halt()

        # Read everything first so a bad entry leaves the bodies untouched
        params = [self.parameter_source.read_body(body.name) for body in self._bodies]
        for body, p in zip(self._bodies, params):
            body.reset(p.x, p.y, p.radius, p.velocity)
        self.tick_count = 0
        logger.debug("Simulation reset with %d bodies", len(self._bodies))

        self._draw_all()

    def get_state(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Return copies of (positions, velocities, masses, radii)."""
        n = len(self._bodies)
        positions = np.array([b.position for b in self._bodies], dtype=np.float64).reshape(n, 2)
        velocities = np.array([b.velocity for b in self._bodies], dtype=np.float64).reshape(n, 2)
        masses = np.array([b.mass for b in self._bodies], dtype=np.float64)
        radii = np.array([b.radius for b in self._bodies], dtype=np.float64)
        return positions, velocities, masses, radii

    def _halt(self):
        self._running = False
        self._cancel_task()

    def _cancel_task(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _draw_all(self):
        if self.renderer is None:
            return
        self.renderer.clear()
        for snap in self.snapshots():
            self.renderer.draw_body(snap)
        self.renderer.present()
