import random
from collections import Counter

from cube import NOTATION, MOVES, parse_move
from scramble import generate_scramble, SCRAMBLE_LENGTH


def test_default_length():
    assert len(generate_scramble()) == SCRAMBLE_LENGTH == 20


def test_custom_length():
    assert len(generate_scramble(7)) == 7
    assert generate_scramble(0) == []


def test_tokens_are_valid_moves():
    for move in generate_scramble(200, rng=random.Random(1)):
        assert move in MOVES
        parse_move(move)


def test_seeded_scrambles_repeat():
    assert generate_scramble(rng=random.Random(42)) == generate_scramble(rng=random.Random(42))


def test_all_faces_and_modifiers_are_drawn():
    scramble = generate_scramble(3000, rng=random.Random(2))
    faces = Counter(move[0] for move in scramble)
    modifiers = Counter(move[1:] for move in scramble)
    assert set(faces) == set(NOTATION)
    assert set(modifiers) == {"", "'", "2"}
    # roughly uniform
    assert min(faces.values()) > 3000 / 6 * 0.8
    assert min(modifiers.values()) > 3000 / 3 * 0.8
