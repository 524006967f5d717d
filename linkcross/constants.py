"""Game-wide constants and the chain steering mode."""

from enum import Enum


class Mode(Enum):
    """How the chain reacts to the player: being built or being guided."""

    CONSTRUCTION = "CONSTRUCTION"
    GUIDAGE = "GUIDAGE"


R_MAX = 100.0
R_MIN_FAISEUR = 1.5
R_MAX_FAISEUR = 5.0
R_CAPTURE = 18.0
R_VIZ = 0.9  # drawing only

# largest displacement of a mobile entity per game update
D_MAX = R_MAX / 40.0
TIME_TO_SPLIT = 500
NB_PARTICULE_MAX = 50
DELTA_SPLIT = 0.5  # radians
COEF_SPLIT = 0.8
SCORE_MAX = 8000

# safety margin used by the circle tests once a game is running
EPSIL_ZERO = 0.5