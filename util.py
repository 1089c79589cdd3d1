import pandas as pd

from cube import FACES, COLORS, COLOR_NAMES, NOTATION, MODIFIERS


def format_time(elapsed_time):
    hours = int(elapsed_time // 3600)
    minutes = int((elapsed_time % 3600) // 60)
    seconds = elapsed_time % 60
    time_str = ""
    if hours > 0:
        time_str += f"{hours}h "
    if minutes > 0:
        time_str += f"{minutes}m "
    if seconds > 0:
        time_str += f"{seconds:.1f}s"
    return time_str.strip() or "0.0s"


def parse_move_sequence(sequence):
    """Split a move string such as "R U2 R'U'" into tokens.

    Spaces are optional. Characters that can't start a move are skipped.
    """
    sequence = sequence.replace(" ", "")
    moves = []
    i = 0
    while i < len(sequence):
        char = sequence[i]
        if char.upper() in NOTATION:
            move = char.upper()
            i += 1
            if i < len(sequence) and sequence[i] in MODIFIERS[1:]:
                move += sequence[i]
                i += 1
            moves.append(move)
        else:
            i += 1
    return moves


def color_count_table(state, expected=9):
    counts = []
    for face in FACES:
        color = COLORS[face]
        count = sum(facelet == color for f in FACES for facelet in state[f])
        counts.append(count)

    df = pd.DataFrame({"count": counts,
                       "expected": [expected] * len(FACES)},
                      index=[COLOR_NAMES[COLORS[face]] for face in FACES])
    df["delta"] = df["count"] - df["expected"]
    return df


def print_color_counts(state):
    print(color_count_table(state).to_string())
