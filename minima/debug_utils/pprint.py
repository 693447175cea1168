import json

from minima.types.atom import Atom, NIL, T
from minima.types.pair import Pair

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_ATOM = "\033[94m"
COLOR_TRUTH = "\033[92m"
COLOR_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "sugar": True,
    "color_atoms": True,
    "color_truth": True,
    "color_forms": True,
}

FORMS = {"quote", "atom", "eq", "car", "cdr", "cons", "cond", "label", "lambda"}


# ----------------- Canonical printer -----------------
def to_canonical(expr) -> str:
    """Render `expr` in dotted-pair notation: ``foo``, ``(a.(b.nil))``."""
    parts: list[str] = []
    # Work stack of pending expressions and literal text.
    stack: list = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Atom):
            parts.append(item.id)
        else:
            stack.extend((")", item.cdr, ".", item.car))
            parts.append("(")
    return "".join(parts)


# ----------------- Sugared printer -----------------
def to_sugar(expr) -> str:
    """Render right-nested pairs as space-separated lists.

    The final tail is always written out, so ``(a.(b.nil))`` prints as
    ``(a b nil)`` and desugars back to the same pairs.
    """
    if isinstance(expr, Atom):
        return expr.id
    items = []
    while isinstance(expr, Pair):
        items.append(to_sugar(expr.car))
        expr = expr.cdr
    items.append(expr.id)
    return "(" + " ".join(items) + ")"


# ----------------- Colorize utility -----------------
def colorize(obj, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(obj, Atom):
        name = obj.id
        if obj in (T, NIL) and options.get("color_truth", True):
            return f"{COLOR_TRUTH}{name}{RESET}"
        if name in FORMS and options.get("color_forms", True):
            return f"{COLOR_FORM}{name}{RESET}"
        if options.get("color_atoms", True):
            return f"{COLOR_ATOM}{name}{RESET}"
        return name
    return str(obj)


def pprint_expr(expr, options: dict = DEFAULT_OPTIONS) -> str:
    """Render `expr` for display, colouring each atom."""
    if isinstance(expr, Atom):
        return colorize(expr, options)
    sugar = options.get("sugar", True)
    items = []
    while isinstance(expr, Pair):
        items.append(pprint_expr(expr.car, options))
        expr = expr.cdr
        if not sugar:
            break
    tail = pprint_expr(expr, options)
    if sugar:
        return "(" + " ".join(items + [tail]) + ")"
    return f"({items[0]}.{tail})"


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return DEFAULT_OPTIONS
    return {**DEFAULT_OPTIONS, **user_opts}
