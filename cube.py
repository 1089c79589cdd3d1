import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

FRONT = "front"
BACK = "back"
TOP = "top"
BOTTOM = "bottom"
LEFT = "left"
RIGHT = "right"

FACES = (FRONT, BACK, TOP, BOTTOM, LEFT, RIGHT)

COLORS = {
    FRONT: "#ff0000",   #red
    BACK: "#ff8c00",    #orange
    TOP: "#ffffff",     #white
    BOTTOM: "#ffff00",  #yellow
    LEFT: "#00ff00",    #green
    RIGHT: "#0000ff"    #blue
}

COLOR_NAMES = {
    COLORS[FRONT]: "Red",
    COLORS[BACK]: "Orange",
    COLORS[TOP]: "White",
    COLORS[BOTTOM]: "Yellow",
    COLORS[LEFT]: "Green",
    COLORS[RIGHT]: "Blue"
}

#Face seen from each direction, used for view switching
NAVIGATION = {
    FRONT:  {"up": TOP,    "down": BOTTOM, "left": LEFT,  "right": RIGHT},
    BACK:   {"up": TOP,    "down": BOTTOM, "left": RIGHT, "right": LEFT},
    TOP:    {"up": BACK,   "down": FRONT,  "left": LEFT,  "right": RIGHT},
    BOTTOM: {"up": FRONT,  "down": BACK,   "left": LEFT,  "right": RIGHT},
    LEFT:   {"up": TOP,    "down": BOTTOM, "left": BACK,  "right": FRONT},
    RIGHT:  {"up": TOP,    "down": BOTTOM, "left": FRONT, "right": BACK}
}

NOTATION = {
    "U": TOP,
    "D": BOTTOM,
    "L": LEFT,
    "R": RIGHT,
    "F": FRONT,
    "B": BACK
}

MODIFIERS = ["", "'", "2"] #cw, ccw and half turn

MOVES = [face + modifier for face in NOTATION for modifier in MODIFIERS]

#new[i] = old[FACE_ROTATION[i]] on the turned face
FACE_ROTATION_CW = [6, 3, 0, 7, 4, 1, 8, 5, 2]
FACE_ROTATION_CCW = [2, 5, 8, 1, 4, 7, 0, 3, 6]

#Edge rows on the four neighbours, listed in the direction a clockwise turn carries them
RINGS = {
    TOP:    [(FRONT, 0), (FRONT, 1), (FRONT, 2),
             (LEFT, 0), (LEFT, 1), (LEFT, 2),
             (BACK, 0), (BACK, 1), (BACK, 2),
             (RIGHT, 0), (RIGHT, 1), (RIGHT, 2)],
    BOTTOM: [(FRONT, 6), (FRONT, 7), (FRONT, 8),
             (RIGHT, 6), (RIGHT, 7), (RIGHT, 8),
             (BACK, 6), (BACK, 7), (BACK, 8),
             (LEFT, 6), (LEFT, 7), (LEFT, 8)],
    RIGHT:  [(FRONT, 2), (FRONT, 5), (FRONT, 8),
             (TOP, 2), (TOP, 5), (TOP, 8),
             (BACK, 6), (BACK, 3), (BACK, 0),
             (BOTTOM, 2), (BOTTOM, 5), (BOTTOM, 8)],
    LEFT:   [(FRONT, 0), (FRONT, 3), (FRONT, 6),
             (BOTTOM, 0), (BOTTOM, 3), (BOTTOM, 6),
             (BACK, 8), (BACK, 5), (BACK, 2),
             (TOP, 0), (TOP, 3), (TOP, 6)],
    FRONT:  [(TOP, 6), (TOP, 7), (TOP, 8),
             (RIGHT, 0), (RIGHT, 3), (RIGHT, 6),
             (BOTTOM, 2), (BOTTOM, 1), (BOTTOM, 0),
             (LEFT, 8), (LEFT, 5), (LEFT, 2)],
    BACK:   [(TOP, 0), (TOP, 1), (TOP, 2),
             (LEFT, 6), (LEFT, 3), (LEFT, 0),
             (BOTTOM, 8), (BOTTOM, 7), (BOTTOM, 6),
             (RIGHT, 2), (RIGHT, 5), (RIGHT, 8)]
}

Move = namedtuple("Move", ["face", "is_prime", "is_double"])


class InvalidMoveToken(ValueError):
    def __init__(self, token):
        super().__init__(f"{token!r} is not a valid move token")
        self.token = token


def parse_move(token):
    """Split a token such as "R", "U'" or "F2" into a Move."""
    if not isinstance(token, str) or not 1 <= len(token) <= 2:
        raise InvalidMoveToken(token)
    letter, modifier = token[0], token[1:]
    if letter not in NOTATION or modifier not in MODIFIERS:
        raise InvalidMoveToken(token)
    return Move(NOTATION[letter], modifier == "'", modifier == "2")


def copy_cube(state):
    return {face: list(state[face]) for face in FACES}


def quarter_turn(state, face, clockwise=True):
    new_state = copy_cube(state)
    ring_size = 3

    #Rotate the face
    mapping = FACE_ROTATION_CW if clockwise else FACE_ROTATION_CCW
    new_state[face] = [state[face][i] for i in mapping]

    #Rotate the ring
    positions = RINGS[face]
    current_colors = [state[f][i] for f, i in positions]

    if clockwise:
        rotated_colors = current_colors[-ring_size:] + current_colors[:-ring_size]
    else:
        rotated_colors = current_colors[ring_size:] + current_colors[:ring_size]

    for (f, i), color in zip(positions, rotated_colors):
        new_state[f][i] = color

    return new_state


def apply_move(state, token, strict=False):
    """Return the state reached by turning one face as given by the token.

    Unrecognised tokens leave the cube as it was (an equal copy is returned)
    unless strict is set, in which case InvalidMoveToken is raised.
    """
    try:
        move = parse_move(token)
    except InvalidMoveToken:
        if strict:
            raise
        logger.warning("Ignoring unrecognised move token %r", token)
        return copy_cube(state)

    turns = 2 if move.is_double else 1
    clockwise = not move.is_prime

    new_state = copy_cube(state)
    for _ in range(turns):
        new_state = quarter_turn(new_state, move.face, clockwise)
    return new_state


def apply_moves(state, moves, strict=False):
    new_state = copy_cube(state)
    for move in moves:
        new_state = apply_move(new_state, move, strict=strict)
    return new_state


def invert_move(move):
    if move.endswith("'"):
        return move[:-1]
    elif move.endswith("2"):
        return move
    else:
        return move + "'"


def invert_sequence(moves):
    return [invert_move(move) for move in reversed(moves)]
