# utils/input_handler.py
from bill_maker.exceptions import CancelAction, GoBackAction


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None) -> str:
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "

    while True:
        v = input(label).strip()

        low = v.lower()
        if low in ("cancel", "c!"):
            raise CancelAction()
        if low in ("back", "b!"):
            raise GoBackAction()

        if not v and default is not None:
            return default
        if not v and allow_empty:
            return ""   # explicit empty value
        if not v:
            print("Enter a value, or 'cancel' / 'back'.")
            continue
        return v


def get_choice(prompt: str, options: list, current=None):
    """
    Numbered pick from options (bill types, designations, night rates).
    Enter keeps `current`; anything outside 1..len(options) asks again.
    """
    for i, opt in enumerate(options, start=1):
        mark = "*" if opt == current else " "
        print(f" {mark}{i}. {opt}")
    default = str(options.index(current) + 1) if current in options else None

    while True:
        n = get_input(prompt, default=default)
        if n.isdigit() and 1 <= int(n) <= len(options):
            return options[int(n) - 1]
        print(f"Pick a number from 1 to {len(options)}.")
