"""Mobile entities: particles that split and faiseurs that crawl as snakes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from . import messages
from .constants import (
    COEF_SPLIT,
    D_MAX,
    DELTA_SPLIT,
    EPSIL_ZERO,
    NB_PARTICULE_MAX,
    R_MAX,
    R_MAX_FAISEUR,
    R_MIN_FAISEUR,
    TIME_TO_SPLIT,
)
from .geometry import Circle, Point, Vector
from .messages import ReadError

ARENA = Circle(Point(0.0, 0.0), R_MAX)


@dataclass(eq=False)
class Mobile:
    """Something that moves each update and bounces off the arena wall."""

    position: Point
    velocity: Vector
    alpha: float
    radius: float

    def move(self, arena: Circle) -> None:
        """Step by the velocity, reflecting it first if the step leaves ``arena``."""
        target = Point(self.position.x + self.velocity.x, self.position.y + self.velocity.y)
        if not arena.includes(Circle(target, self.radius), EPSIL_ZERO):
            reflected = self.velocity.reflect(self.position)
            self.velocity = reflected
            self.alpha = reflected.angle
            target = Point(self.position.x + reflected.x, self.position.y + reflected.y)
        self.position = target


@dataclass(eq=False)
class Particle(Mobile):
    """A point-like mobile that splits in two after a fixed lifetime."""

    radius: float = 0.0
    counter: int = 0

    def increase_counter(self) -> None:
        self.counter += 1


@dataclass(eq=False)
class Faiseur(Mobile):
    """A snake of circles; the head leads and the tail follows its track."""

    elements: list[Mobile] = field(default_factory=list)

    def add_element(self, element: Mobile) -> None:
        self.elements.append(element)

    def advance(self, arena: Circle) -> None:
        """Push a moved copy of the head to the front and drop the tail."""
        head = self.elements[0]
        new_head = Mobile(head.position, head.velocity, head.alpha, head.radius)
        new_head.move(arena)
        new_head.alpha = new_head.velocity.angle
        self.elements.insert(0, new_head)
        self.elements.pop()


def _numbers(line: str, count: int, what: str) -> list[float]:
    fields = line.split()
    try:
        values = [float(value) for value in fields[:count]]
    except ValueError:
        raise ReadError(f"malformed {what} line: {line!r}\n") from None
    if len(values) < count:
        raise ReadError(f"malformed {what} line: {line!r}\n")
    return values


def parse_particle(particles: list[Particle], line: str) -> Particle:
    """Read ``x y angle displacement counter``, check it and append a particle."""
    x, y, angle, displacement, counter = _numbers(line, 5, "particle")
    if displacement < 0:
        raise ReadError(messages.mobile_displacement(displacement))
    velocity = Vector.polar(Point(x, y), displacement, angle)
    if counter >= TIME_TO_SPLIT or counter < 0:
        raise ReadError(messages.particule_counter(counter))
    if not ARENA.includes(Circle(Point(x, y), 0.0)):
        raise ReadError(messages.particule_outside(x, y))
    if velocity.norm > D_MAX:
        raise ReadError(messages.mobile_displacement(displacement))
    particle = Particle(Point(x, y), velocity, angle)
    particles.append(particle)
    return particle


def _collision(faiseurs: list[Faiseur], candidate: Faiseur) -> str | None:
    new_id = len(faiseurs)
    for k, element in enumerate(candidate.elements):
        own = Circle(element.position, candidate.radius)
        for i, other in enumerate(faiseurs):
            for j, other_element in enumerate(other.elements):
                if own.intrudes(Circle(other_element.position, other.radius)):
                    return messages.faiseur_element_collision(new_id, k, i, j)
    return None


def parse_faiseur(faiseurs: list[Faiseur], line: str) -> Faiseur:
    """Read ``x y angle displacement radius nbe``, build the snake and append it."""
    x, y, angle, displacement, radius, nbe = _numbers(line, 6, "faiseur")
    if nbe <= 0:
        raise ReadError(messages.faiseur_nbe(nbe))
    if radius < R_MIN_FAISEUR or radius > R_MAX_FAISEUR:
        raise ReadError(messages.faiseur_radius(radius))
    if displacement < 0:
        raise ReadError(messages.mobile_displacement(displacement))
    velocity = Vector.polar(Point(x, y), displacement, angle)
    if velocity.norm > D_MAX:
        raise ReadError(messages.mobile_displacement(displacement))
    if not ARENA.includes(Circle(Point(x, y), radius)):
        raise ReadError(messages.faiseur_outside(x, y))

    position = Point(x, y)
    faiseur = Faiseur(position, velocity, angle, radius)
    faiseur.add_element(Mobile(position, velocity, angle, radius))

    trail_velocity = velocity
    trail_angle = angle
    for _ in range(math.ceil(nbe)):
        step = Point(
            position.x - displacement * math.cos(trail_angle),
            position.y - displacement * math.sin(trail_angle),
        )
        if not ARENA.includes(Circle(step, radius)):
            trail_velocity = trail_velocity.reflect(position)
            trail_angle = trail_velocity.angle
            step = Point(
                position.x - displacement * math.cos(trail_angle),
                position.y - displacement * math.sin(trail_angle),
            )
        faiseur.add_element(Mobile(step, trail_velocity, trail_angle, radius))
        position = step

    report = _collision(faiseurs, faiseur)
    if report is not None:
        raise ReadError(report)
    faiseurs.append(faiseur)
    return faiseur


def update_particles(particles: list[Particle]) -> None:
    """Age, split or move every particle, editing ``particles`` in place."""
    for particle in list(particles):
        particle.increase_counter()
        if particle.counter != TIME_TO_SPLIT:
            particle.move(ARENA)
            continue
        particles.remove(particle)
        if len(particles) + 1 >= NB_PARTICULE_MAX:
            continue
        norm = particle.velocity.norm * COEF_SPLIT
        for alpha in (particle.alpha + DELTA_SPLIT, particle.alpha - DELTA_SPLIT):
            child = Particle(particle.position, Vector.polar(particle.position, norm, alpha), alpha)
            particles.append(child)
            child.move(ARENA)


def update_faiseurs(faiseurs: list[Faiseur]) -> None:
    """Advance every faiseur whose next head position does not touch another one."""
    for i, faiseur in enumerate(faiseurs):
        head = faiseur.elements[0]
        probe = Circle(
            Point(head.position.x + faiseur.velocity.x, head.position.y + faiseur.velocity.y),
            faiseur.radius,
        )
        blocked = any(
            probe.intrudes(Circle(element.position, other.radius), EPSIL_ZERO)
            for j, other in enumerate(faiseurs)
            if j != i
            for element in other.elements
        )
        if not blocked:
            faiseur.advance(ARENA)