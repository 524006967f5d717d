import math

import pytest

from linkcross import messages
from linkcross.constants import R_CAPTURE, R_MAX, Mode
from linkcross.game import Game, Status
from linkcross.geometry import Point
from linkcross.graphic import Color
from linkcross.messages import ReadError

VALID = [
    "# a game",
    "100",
    "",
    "# particles",
    "1",
    "  10 10 0.5 1 0",
    "1",
    "-50 0 0 1 2 3",
    "2",
    "-90 0",
    "-80 0",
    "GUIDAGE",
]


class RecordingPainter:
    def __init__(self):
        self.calls = []

    def draw_circle(self, center, radius, width, fill, outline):
        self.calls.append(("circle", center, radius, width, fill, outline))

    def draw_segment(self, p1, p2, width, color):
        self.calls.append(("segment", p1, p2, width, color))


@pytest.fixture
def game():
    g = Game()
    g.read(VALID)
    return g


def test_read_valid_file(game):
    assert game.loaded
    assert game.score == 100
    assert len(game.particles) == 1
    assert len(game.faiseurs) == 1
    assert len(game.faiseurs[0].elements) == 4
    assert list(game.chain) == [Point(-90.0, 0.0), Point(-80.0, 0.0)]
    assert game.chain.mode is Mode.GUIDAGE


def test_score_zero_rejected():
    g = Game()
    with pytest.raises(ReadError) as info:
        g.read(["0", "0", "0", "0", "CONSTRUCTION"])
    assert info.value.message == messages.score_outside(0)
    assert not g.loaded
    assert g.score == 0


def test_score_above_max_rejected():
    g = Game()
    with pytest.raises(ReadError) as info:
        g.read(["8001"])
    assert info.value.message == messages.score_outside(8001)


def test_too_many_particles():
    g = Game()
    with pytest.raises(ReadError) as info:
        g.read(["10", "51"])
    assert info.value.message == messages.nb_particule_outside(51)


def test_error_clears_board(game):
    with pytest.raises(ReadError):
        game.read(["100", "1", "10 10 0.5 1 0", "0", "1", "0 0"])
    assert game.particles == []
    assert len(game.chain) == 0
    assert not game.loaded


def test_articulation_collides_with_faiseur():
    g = Game()
    with pytest.raises(ReadError) as info:
        g.read(["100", "0", "1", "-90 0 0 0 5 1", "1", "-90 0", "CONSTRUCTION"])
    assert info.value.message == messages.chaine_articulation_collision(0, 0, 0)


def test_update_decrements_then_loses():
    g = Game()
    g.read(["1", "0", "0", "0", "CONSTRUCTION"])
    g.update()
    assert g.score == 0
    assert g.status is Status.ONGOING
    g.update()
    assert g.status is Status.LOST


def test_update_moves_particle(game):
    before = game.particles[0].position
    game.update()
    after = game.particles[0].position
    assert game.score == 99
    assert math.hypot(after.x - before.x, after.y - before.y) == pytest.approx(1.0)


def test_to_text_empty_board():
    g = Game()
    g.read(["5", "0", "0", "0", "CONSTRUCTION"])
    assert g.to_text() == (
        "# fichier de sauvegarde\n# score: \n5\n\n"
        "# nombre d’entité particule puis les données d’une entité par ligne\n0\n\n"
        "# nombre d’entité faiseur puis les données d’une entité par ligne\n0\n\n"
        "# nombre d’articulations (nul veut dire « pas de chaîne »)\n"
        "#        puis une ligne par articulation\n0\n\nCONSTRUCTION"
    )


def test_to_text_chain_line(game):
    assert "\t-90.000000\t0.000000\t\n" in game.to_text()
    assert game.to_text().endswith("GUIDAGE")


def test_text_round_trip(game):
    other = Game()
    other.read(game.to_text().splitlines())
    assert other.score == game.score
    assert list(other.chain) == list(game.chain)
    assert other.chain.mode is game.chain.mode
    assert len(other.particles) == len(game.particles)
    assert other.particles[0].position == game.particles[0].position
    assert other.particles[0].alpha == pytest.approx(game.particles[0].alpha)
    assert len(other.faiseurs) == len(game.faiseurs)


def test_save_and_load(game, tmp_path):
    path = tmp_path / "save.txt"
    game.save(path)
    other = Game()
    other.load(path)
    assert other.loaded
    assert other.to_text().startswith(game.to_text()[:60])
    assert list(other.chain) == list(game.chain)


def test_load_missing_file(tmp_path):
    g = Game()
    with pytest.raises(FileNotFoundError):
        g.load(tmp_path / "missing.txt")
    assert not g.loaded


def test_draw_order_and_shapes(game):
    painter = RecordingPainter()
    game.draw(painter)
    assert painter.calls[0] == (
        "circle", Point(0.0, 0.0), R_MAX, 2, Color.NO_COLOR, Color.GREEN
    )
    segments = [c for c in painter.calls if c[0] == "segment"]
    assert len(segments) == len(game.chain) - 1
    assert painter.calls[-1] == (
        "circle", Point(-80.0, 0.0), R_CAPTURE, 2, Color.NO_COLOR, Color.RED
    )
    blue = [c for c in painter.calls if c[0] == "circle" and c[5] is Color.BLUE]
    assert len(blue) == len(game.faiseurs[0].elements)