"""Entry point for Order & Chaos. Load config, wire players, start OrderChaosGame."""

import yaml
from pathlib import Path

from order_chaos.Board import BOARD_SIZE
from order_chaos.OrderChaosGame import OrderChaosGame
from order_chaos.Player import CHAOS, ORDER, GuiHumanPlayer, HumanPlayer, RandomPlayer, ROLE_NAMES
from order_chaos.engine import win_rules
from order_chaos.gui import text_view
from order_chaos.utils.cli import parse_args
from order_chaos.utils.logger import log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `order_chaos/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


GUI_DEMO_MOVE_DELAY = 0.5


def resolve_move_delay(settings, gui, automated):
    """Seconds to pause after each move; random games in the window get a watchable default."""
    delay = settings.get("move_delay_seconds")
    if delay is not None:
        return float(delay)
    return GUI_DEMO_MOVE_DELAY if gui and automated else 0.0


def build_players(mode, automated, seed=None, view=None):
    """Return (order_player, chaos_player) for the requested mode."""
    if automated:
        mode = "ai-vs-ai"

    def human(role):
        return GuiHumanPlayer(role, view) if view else HumanPlayer(role)

    def ai(role):
        # distinct but reproducible streams per role when seeded
        if seed is None:
            return RandomPlayer(role)
        return RandomPlayer(role, seed=seed + 1 if role == CHAOS else seed)

    if mode == "human-vs-human":
        return human(ORDER), human(CHAOS)
    if mode == "human-vs-ai":
        return human(ORDER), ai(CHAOS)
    if mode == "ai-vs-human":
        return ai(ORDER), human(CHAOS)
    if mode == "ai-vs-ai":
        return ai(ORDER), ai(CHAOS)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    automated = args.ai_vs_ai_demo if args.ai_vs_ai_demo is not None else bool(settings.get("ai_vs_ai_demo", False))
    early_detection = (
        args.early_detection
        if args.early_detection is not None
        else bool(settings.get("early_chaos_detection", False))
    )
    seed = args.seed if args.seed is not None else settings.get("seed")
    move_delay = resolve_move_delay(settings, args.gui, automated)

    view = None
    if args.gui:
        from order_chaos.gui.pygame_view import PygameView, WindowClosed

        view = PygameView(board_size=BOARD_SIZE)

    order_player, chaos_player = build_players(args.mode, automated, seed=seed, view=view)
    log_event(f"Order: {type(order_player).__name__}, Chaos: {type(chaos_player).__name__}")

    game = OrderChaosGame(
        order_player,
        chaos_player,
        logger=log_event,
        renderer=view.render if view else text_view.render,
        early_detection=early_detection,
        move_delay=move_delay,
    )

    if view is None:
        try:
            result = game.play()
        except EOFError:
            log_event("Input closed")
            return None
        print(f"{ROLE_NAMES[result]} wins")
        return result

    try:
        view.show_welcome()
        result = game.play()
        run = win_rules.find_qualifying_run(game.state.board) or ()
        view.show_end(game.state, highlight=run)
    except WindowClosed:
        log_event("Window closed")
        return None
    finally:
        view.close()
    print(f"{ROLE_NAMES[result]} wins")
    return result


if __name__ == "__main__":
    main()
