"""Error and success messages reported while reading a game file."""


class ReadError(ValueError):
    """Raised when a game file is rejected; carries the report text."""

    def __init__(self, message: str) -> None:
        super().__init__(message.rstrip("\n"))
        self.message = message


def _real(value: float) -> str:
    return f"{float(value):f}"


def _whole(value: float) -> str:
    return str(int(value))


def score_outside(score) -> str:
    return f"score ({_whole(score)}) must be within ]0, score_max]\n"


def particule_outside(x, y) -> str:
    return f"particule at ({_real(x)};{_real(y)}) is outside the arena\n"


def faiseur_outside(x, y) -> str:
    return f"faiseur at ({_real(x)};{_real(y)}) is outside the arena\n"


def articulation_outside(x, y) -> str:
    return f"articulation at ({_real(x)};{_real(y)}) is outside the arena\n"


def mobile_displacement(d) -> str:
    return f"mobile entity displacement ({_real(d)}) must be within [0, d_max]\n"


def nb_particule_outside(nb) -> str:
    return f"particule number ({_whole(nb)}) must be within [0, nb_particule_max]\n"


def particule_counter(counter) -> str:
    return f"particule counter ({_whole(counter)}) must be within [0, time_to_spli[ \n"


def faiseur_radius(radius) -> str:
    return (
        f"faiseur radius ({_real(radius)}) is not within "
        "[r_min_faiseur, r_max_faiseur]\n"
    )


def faiseur_nbe(nbe) -> str:
    return f"faiseur nbe ({_whole(nbe)}) is not strictly positive\n"


def faiseur_element_collision(id1, index1, id2, index2) -> str:
    """Describe a collision; the pair is ordered so both orders read the same."""
    if index1 > index2 or (index1 == index2 and id1 > id2):
        id1, index1, id2, index2 = id2, index2, id1, index1
    return (
        f"faiseur ({_whole(id1)}) element ({_whole(index1)}) collides with "
        f"faiseur ({_whole(id2)}) element ({_whole(index2)})\n"
    )


def chaine_racine(x, y) -> str:
    return (
        f"root at ({_real(x)};{_real(y)}) is not close enough "
        "to the arena boundary\n"
    )


def chaine_max_distance(smallest_index) -> str:
    return (
        f"too long distance between articulation ({_whole(smallest_index)}) "
        "and the following one\n"
    )


def chaine_articulation_collision(articulation_index, faiseur_id, element_index) -> str:
    return (
        f"articulation ({_whole(articulation_index)}) collides with "
        f"faiseur ({_whole(faiseur_id)}) element ({_whole(element_index)})\n"
    )


def success() -> str:
    return "Correct file\n"