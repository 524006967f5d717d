"""The game state: reading and writing game files, updating and drawing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

from . import messages
from .chain import Chain, parse_articulation, parse_mode
from .constants import NB_PARTICULE_MAX, R_CAPTURE, R_MAX, R_VIZ, SCORE_MAX, Mode
from .geometry import Circle, Point
from .graphic import Color
from .messages import ReadError
from .mobile import (
    Faiseur,
    Particle,
    parse_faiseur,
    parse_particle,
    update_faiseurs,
    update_particles,
)

_DRAW_WIDTH = 2


class Status(Enum):
    ONGOING = auto()
    WON = auto()
    LOST = auto()


class _Stage(Enum):
    SCORE = auto()
    NB_PARTICULE = auto()
    PARTICULE = auto()
    NB_FAISEUR = auto()
    FAISEUR = auto()
    NB_CHAINE = auto()
    CHAINE = auto()
    CHAINE_MODE = auto()
    FIN = auto()


def _first_int(line: str, what: str) -> int:
    words = line.split()
    try:
        return int(words[0])
    except (IndexError, ValueError):
        raise ReadError(f"malformed {what} line: {line!r}\n") from None


def _real(value: float) -> str:
    return f"{float(value):f}"


@dataclass
class Game:
    """Everything on the board: score, particles, faiseurs and the chain."""

    score: int = 0
    particles: list[Particle] = field(default_factory=list)
    faiseurs: list[Faiseur] = field(default_factory=list)
    chain: Chain = field(default_factory=Chain)
    status: Status = Status.ONGOING
    loaded: bool = False

    def reset(self) -> None:
        """Empty the board and forget the last reading."""
        self.particles.clear()
        self.faiseurs.clear()
        self.chain.reset()
        self.score = 0
        self.status = Status.ONGOING
        self.loaded = False

    def load(self, path) -> None:
        """Read a game file; raises OSError or ReadError, leaving the board empty."""
        self.reset()
        with open(path, encoding="utf-8") as handle:
            self.read(handle)

    def read(self, lines: Iterable[str]) -> None:
        """Read game lines, replacing the board; on ReadError the board is emptied."""
        self.reset()
        try:
            self._decode(lines)
        except ReadError:
            self.reset()
            raise
        self.loaded = True

    def _decode(self, lines: Iterable[str]) -> None:
        stage = _Stage.SCORE
        expected = 0
        count = 0
        for raw in lines:
            line = raw.lstrip()
            if not line or line.startswith("#"):
                continue
            if stage is _Stage.SCORE:
                try:
                    score = int(line.split()[0])
                except ValueError:
                    score = 0
                self.score = score
                if score <= 0 or score > SCORE_MAX:
                    raise ReadError(messages.score_outside(score))
                stage = _Stage.NB_PARTICULE
            elif stage is _Stage.NB_PARTICULE:
                expected = _first_int(line, "particle count")
                if expected < 0 or expected > NB_PARTICULE_MAX:
                    raise ReadError(messages.nb_particule_outside(expected))
                stage = _Stage.PARTICULE if expected else _Stage.NB_FAISEUR
                count = 0
            elif stage is _Stage.PARTICULE:
                count += 1
                if count == expected:
                    stage = _Stage.NB_FAISEUR
                parse_particle(self.particles, line)
            elif stage is _Stage.NB_FAISEUR:
                expected = _first_int(line, "faiseur count")
                stage = _Stage.FAISEUR if expected else _Stage.NB_CHAINE
                count = 0
            elif stage is _Stage.FAISEUR:
                count += 1
                if count == expected:
                    stage = _Stage.NB_CHAINE
                parse_faiseur(self.faiseurs, line)
            elif stage is _Stage.NB_CHAINE:
                expected = _first_int(line, "articulation count")
                stage = _Stage.CHAINE if expected else _Stage.CHAINE_MODE
                count = 0
            elif stage is _Stage.CHAINE:
                count += 1
                if count == expected:
                    stage = _Stage.CHAINE_MODE
                parse_articulation(self.chain, line)
            elif stage is _Stage.CHAINE_MODE:
                parse_mode(self.chain, line)
                stage = _Stage.FIN
                self._check_chain_collisions()

    def _check_chain_collisions(self) -> None:
        for index, articulation in enumerate(self.chain):
            point = Circle(articulation, 0.0)
            for faiseur_id, faiseur in enumerate(self.faiseurs):
                for element_index, element in enumerate(faiseur.elements):
                    if Circle(element.position, faiseur.radius).includes(point):
                        raise ReadError(
                            messages.chaine_articulation_collision(
                                index, faiseur_id, element_index
                            )
                        )

    def update(self) -> None:
        """Advance the game by one tick; the game is lost once the score runs out."""
        if self.score == 0:
            self.status = Status.LOST
            return
        self.score -= 1
        update_particles(self.particles)
        update_faiseurs(self.faiseurs)

    def to_text(self) -> str:
        """The board in the game file format."""
        particle_lines = "".join(
            f"\t{_real(p.position.x)}\t{_real(p.position.y)}\t{_real(p.alpha)}"
            f"\t{_real(p.velocity.norm)}\t{p.counter}\t\n"
            for p in self.particles
        )
        faiseur_lines = "".join(
            f"\t{_real(f.position.x)}\t{_real(f.position.y)}\t{_real(f.alpha)}"
            f"\t{_real(f.velocity.norm)}\t{_real(f.radius)}\t{len(f.elements)}\t\n"
            for f in self.faiseurs
        )
        chain_lines = "".join(f"\t{_real(p.x)}\t{_real(p.y)}\t\n" for p in self.chain)
        mode = "CONSTRUCTION" if self.chain.mode is Mode.CONSTRUCTION else "GUIDAGE"
        return (
            "# fichier de sauvegarde\n"
            "# score: \n"
            f"{self.score}\n"
            "\n"
            "# nombre d’entité particule puis les données d’une entité par ligne\n"
            f"{len(self.particles)}\n"
            f"{particle_lines}\n"
            "# nombre d’entité faiseur puis les données d’une entité par ligne\n"
            f"{len(self.faiseurs)}\n"
            f"{faiseur_lines}\n"
            "# nombre d’articulations (nul veut dire « pas de chaîne »)\n"
            "#        puis une ligne par articulation\n"
            f"{len(self.chain)}\n"
            f"{chain_lines}\n"
            f"{mode}"
        )

    def save(self, path) -> None:
        """Write the board to ``path`` in the game file format."""
        Path(path).write_text(self.to_text(), encoding="utf-8")

    def draw(self, painter) -> None:
        """Draw the arena, particles, faiseurs and chain, in that order."""
        painter.draw_circle(Point(0.0, 0.0), R_MAX, _DRAW_WIDTH, Color.NO_COLOR, Color.GREEN)
        for particle in self.particles:
            painter.draw_circle(particle.position, R_VIZ, _DRAW_WIDTH, Color.CYAN, Color.GREEN)
        for faiseur in self.faiseurs:
            for element in faiseur.elements:
                painter.draw_circle(element.position, element.radius, 1, Color.NO_COLOR, Color.BLUE)
        points = list(self.chain)
        for current, following in zip(points, points[1:] + [None]):
            painter.draw_circle(current, R_VIZ, _DRAW_WIDTH, Color.NO_COLOR, Color.RED)
            if following is not None:
                painter.draw_segment(current, following, _DRAW_WIDTH, Color.RED)
        if points:
            painter.draw_circle(points[-1], R_CAPTURE, _DRAW_WIDTH, Color.NO_COLOR, Color.RED)