import logging
from collections import namedtuple

import numpy as np

from cube import FACES, COLORS, COLOR_NAMES, apply_moves, copy_cube
from scramble import generate_scramble, SCRAMBLE_LENGTH

logger = logging.getLogger(__name__)

CENTER = 4
FACELETS_PER_FACE = 9
TOTAL_FACELETS = FACELETS_PER_FACE * len(FACES)

#vector codes: 0 is an unfilled facelet, 1..6 follow FACES
COLOR_CODES = {COLORS[face]: code for code, face in enumerate(FACES, start=1)}
CODE_COLORS = {code: color for color, code in COLOR_CODES.items()}
CODE_COLORS[0] = None

CubeValidation = namedtuple("CubeValidation", ["valid", "color_counts", "total_filled"])


def create_solved_cube():
    return {face: [COLORS[face]] * FACELETS_PER_FACE for face in FACES}


def create_empty_cube():
    """Blank cube for manual color entry, only the centers are filled in."""
    cube = {}
    for face in FACES:
        facelets = [None] * FACELETS_PER_FACE
        facelets[CENTER] = COLORS[face]
        cube[face] = facelets
    return cube


def is_solved(state):
    # Uniform faces are enough, the colors are not checked against COLORS
    return all(len(set(state[face])) == 1 for face in FACES)


def generate_scrambled_cube_with_moves(scramble_length=SCRAMBLE_LENGTH, rng=None):
    scramble = generate_scramble(scramble_length, rng=rng)
    return apply_moves(create_solved_cube(), scramble), scramble


def generate_scrambled_cube(scramble_length=SCRAMBLE_LENGTH, rng=None):
    state, _ = generate_scrambled_cube_with_moves(scramble_length, rng=rng)
    return state


def count_filled(state):
    return sum(color is not None for face in FACES for color in state[face])


def validate_cube(state):
    """Count every canonical color over the 54 facelets.

    The cube is valid when nothing is left unfilled and each color shows up
    exactly 9 times. Colors outside COLORS still count as filled.
    """
    facelets = [color for face in FACES for color in state[face]]
    color_counts = {COLORS[face]: facelets.count(COLORS[face]) for face in FACES}
    total_filled = count_filled(state)

    valid = total_filled == TOTAL_FACELETS and all(
        count == FACELETS_PER_FACE for count in color_counts.values())
    return CubeValidation(valid, color_counts, total_filled)


def validation_message(result):
    if result.valid:
        return None
    if result.total_filled < TOTAL_FACELETS:
        return f"Please fill all {TOTAL_FACELETS - result.total_filled} remaining squares."

    issues = []
    for color, count in result.color_counts.items():
        if count != FACELETS_PER_FACE:
            issues.append(f"{COLOR_NAMES[color]}: {count}/{FACELETS_PER_FACE}")
    return "Invalid color counts. " + ", ".join(issues)


def _check_face(face):
    if face not in FACES:
        raise ValueError(f"{face} is not a valid Face Name!")


def set_facelet(state, face, index, color):
    """Return a copy of state with one facelet recolored.

    Centers are fixed, asking to recolor index 4 gives back an unchanged copy.
    """
    _check_face(face)
    if not 0 <= index < FACELETS_PER_FACE:
        raise ValueError(f"Facelet index must be between 0 and 8, got {index}")

    new_state = copy_cube(state)
    if index == CENTER:
        logger.debug("Refusing to recolor the center of %s", face)
        return new_state
    new_state[face][index] = color
    return new_state


def clear_face(state, face):
    _check_face(face)
    new_state = copy_cube(state)
    facelets = [None] * FACELETS_PER_FACE
    facelets[CENTER] = state[face][CENTER]
    new_state[face] = facelets
    return new_state


def state_vector(state):
    """Flatten a state to 54 uint8 codes in FACES order."""
    try:
        codes = [0 if color is None else COLOR_CODES[color]
                 for face in FACES for color in state[face]]
    except KeyError as e:
        raise ValueError(f"{e.args[0]} is not one of the cube colors") from e
    return np.array(codes, dtype=np.uint8)


def from_state_vector(vector):
    vector = np.asarray(vector)
    if vector.shape != (TOTAL_FACELETS,):
        raise ValueError(f"State vector must hold {TOTAL_FACELETS} codes, got shape {vector.shape}")
    if int(vector.max()) >= len(CODE_COLORS):
        raise ValueError(f"State vector holds unknown color code {int(vector.max())}")

    state = {}
    for n, face in enumerate(FACES):
        codes = vector[n * FACELETS_PER_FACE:(n + 1) * FACELETS_PER_FACE]
        state[face] = [CODE_COLORS[int(code)] for code in codes]
    return state
