"""English messages."""

TRANSLATIONS = {
    "label.title": "Waiting Tile Calculator",
    "label.subtitle": "Finds the winning tiles of a 13-tile hand",
    "label.hand": "Hand",
    "label.tile_count": "{n} tiles",
    "label.random_hand": "Random hand",

    "prompt.hand": "Enter a hand (e.g. 1112345678999m / r=random / q=quit)",

    "msg.empty_hand": "Please enter a hand.",
    "msg.waits": "Waiting on: {tiles}",
    "msg.no_waits": "No winning waits.",
    "msg.not_13": "The hand does not hold 13 tiles ({n} tiles).",
    "msg.invalid_input": "Invalid input: {error}",
    "msg.log_saved": "Log saved: {path}",
    "msg.goodbye": "Goodbye.",

    "shape.seven_pairs": "Seven pairs",
    "shape.standard": "Standard",
}
