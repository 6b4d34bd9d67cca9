# Canonical cell kinds (grid storage) and display tile ids (view layer)

PATH = 0
WALL = 1

# Display ids produced by render.layers.compose_view
T_PATH = 10
T_WALL = 20
T_COIN = 30
T_TRAP = 40
T_ADVERSARY = 50
T_FINISH = 60
T_PLAYER = 70

TEXT_GLYPHS = {
    T_PATH: ".",
    T_WALL: "#",
    T_COIN: "$",
    T_TRAP: "^",
    T_ADVERSARY: "A",
    T_FINISH: "F",
    T_PLAYER: "@",
}


def is_open(kind: int) -> bool:
    return kind == PATH
