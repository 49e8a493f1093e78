"""CLI options for selecting players, settings file, and display."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Order & Chaos")
    parser.add_argument(
        "--mode",
        choices=["human-vs-human", "human-vs-ai", "ai-vs-human", "ai-vs-ai"],
        default="human-vs-human",
        help="Play mode (who plays Order/Chaos)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random players")
    parser.add_argument(
        "--ai-vs-ai-demo",
        action="store_true",
        default=None,
        help="Automated-play mode: both roles make random moves (overrides --mode)",
    )
    parser.add_argument(
        "--early-detection",
        action="store_true",
        default=None,
        help="Declare Chaos the winner as soon as no five can be completed",
    )
    return parser.parse_args(argv)
