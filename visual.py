from bokeh.plotting import figure
from bokeh.models import ColumnDataSource, LabelSet, Button, TextInput, Div
from bokeh.layouts import column, row
from bokeh.io import curdoc
from cube import FACES, NOTATION, apply_move
from state import create_solved_cube, is_solved, validate_cube, validation_message
from scramble import generate_scramble
from solver import generate_solution, solution_moves
from util import parse_move_sequence

#configuration
use_labels = False
animation_delay = 300
scramble_length = 20
empty_color = "#cccccc"

#Lower left corner of each face on the unfolded net
faces_square = {
    "top": (3, 6),
    "left": (0, 3),
    "front": (3, 3),
    "right": (6, 3),
    "back": (9, 3),
    "bottom": (3, 0)
}


def net_data(state):
    xs, ys, colors, labels = [], [], [], []
    for face in FACES:
        fx, fy = faces_square[face]
        for i, color in enumerate(state[face]):
            row_id, col_id = divmod(i, 3)
            xs.append(fx + col_id + 0.5)
            ys.append(fy + (2 - row_id) + 0.5)
            colors.append(color if color is not None else empty_color)
            labels.append(str(i))
    return dict(x = xs, y = ys, color = colors, label = labels)


def net_figure(state, title = "Cube"):
    source = ColumnDataSource(data = net_data(state))

    p_square = figure(width = 480,
                      height = 380,
                      title = title,
                      match_aspect = True,
                      x_range = (-0.5, 12.5),
                      y_range = (-0.5, 9.5))
    p_square.grid.visible = False
    p_square.axis.visible = False
    p_square.outline_line_color = None
    p_square.toolbar_location = None
    p_square.title.align = "center"

    p_square.rect(x = "x",
                  y = "y",
                  width = 0.95,
                  height = 0.95,
                  fill_color = "color",
                  line_color = "black",
                  source = source)

    for fx, fy in faces_square.values():
        p_square.rect(x = fx + 1.5,
                      y = fy + 1.5,
                      width = 3,
                      height = 3,
                      fill_color = None,
                      line_color = "black",
                      line_width = 3)

    if use_labels:
        labels = LabelSet(x = "x",
                          y = "y",
                          text = "label",
                          source = source,
                          text_align = "center",
                          text_baseline = "middle",
                          text_font_size = "9pt")
        p_square.add_layout(labels)

    return p_square, source


def build_document(doc):
    cube_state = [create_solved_cube()]
    sequence_executing = [False]

    p_square, source = net_figure(cube_state[0], title = "Rubik's Cube")
    status = Div(text = "")
    text_input = TextInput(value = "", width = 300)

    def refresh():
        source.data = net_data(cube_state[0])
        message = validation_message(validate_cube(cube_state[0]))
        if message:
            status.text = message
        else:
            status.text = "Solved" if is_solved(cube_state[0]) else ""

    def rotate_face(move):
        cube_state[0] = apply_move(cube_state[0], move)
        refresh()

    def play(moves):
        if sequence_executing[0] or not moves:
            return
        sequence_executing[0] = True
        disable_all_buttons()

        def execute_next_move(move_index):
            if move_index < len(moves):
                rotate_face(moves[move_index])
                doc.add_timeout_callback(lambda: execute_next_move(move_index + 1), animation_delay)
            else:
                sequence_executing[0] = False
                enable_all_buttons()

        execute_next_move(0)

    def execute_sequence():
        moves = parse_move_sequence(text_input.value)
        text_input.value = ""
        play(moves)

    def execute_scramble():
        play(generate_scramble(scramble_length))

    def execute_solution():
        play(solution_moves(generate_solution(cube_state[0])))

    def reset():
        cube_state[0] = create_solved_cube()
        refresh()

    move_buttons = []
    for letter in NOTATION:
        for move in (letter, letter + "'"):
            button = Button(label = move, button_type = "default", width = 50)
            button.on_click(lambda move = move: rotate_face(move))
            move_buttons.append(button)

    button_scramble = Button(label = "Scramble", button_type = "warning", width = 110)
    button_scramble.on_click(execute_scramble)

    button_solver = Button(label = "Play Solution", button_type = "success", width = 110)
    button_solver.on_click(execute_solution)

    button_reset = Button(label = "Reset", button_type = "danger", width = 110)
    button_reset.on_click(reset)

    execute_button = Button(label = "Execute Sequence", button_type = "success", width = 150)
    execute_button.on_click(execute_sequence)

    all_buttons = move_buttons + [button_scramble, button_solver, button_reset, execute_button]

    def disable_all_buttons():
        for btn in all_buttons:
            btn.disabled = True

    def enable_all_buttons():
        for btn in all_buttons:
            btn.disabled = False

    button_col = column(
        *[row(*move_buttons[i:i + 2]) for i in range(0, len(move_buttons), 2)],
        row(button_scramble),
        row(button_solver),
        row(button_reset)
    )

    layout = column(
        row(p_square, button_col),
        row(execute_button, text_input),
        row(status)
    )

    doc.add_root(layout)
    doc.title = "Rubik's Cube Interface"
    return layout


#bokeh serve visual.py
if __name__.startswith("bokeh_app"):
    build_document(curdoc())
