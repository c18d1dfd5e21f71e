#!/usr/bin/env python3
"""
Sentibot - Main Entry Point
===========================

Command-line interface for the rule-based responder.

Usage:
    python main.py                    # Chat on stdin/stdout
    python main.py --tui              # Start terminal UI
    python main.py --test "Hello"     # Analyze a single message
    python main.py --status           # Show configuration summary
    python main.py --init-config PATH # Write a default config file
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from core.config import Config, load_config, save_config
from core.exceptions import ChatbotError, UIError
from core.logging import setup_logging, get_logger

logger = get_logger("main")


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Sentibot - rule-based conversational responder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                          Chat on the console ('quit' exits)
  python main.py --tui                    Start terminal UI
  python main.py --test "I feel great"    Show the analysis of one message
  python main.py --seed 7                 Reproducible reply choice
  python main.py --init-config cfg.yaml   Write default configuration
        """
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--tui",
        action="store_true",
        help="Start terminal UI"
    )
    mode_group.add_argument(
        "--test",
        type=str,
        metavar="MESSAGE",
        help="Process one message and print the analysis"
    )
    mode_group.add_argument(
        "--status",
        action="store_true",
        help="Show configuration and table summary"
    )
    mode_group.add_argument(
        "--init-config",
        type=str,
        metavar="PATH",
        help="Write a default configuration file"
    )

    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reply selection"
    )
    parser.add_argument(
        "--history-size",
        type=int,
        metavar="N",
        help="Number of inputs kept in history"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr"
    )

    return parser.parse_args(argv)


def run_status_check(config: Config) -> None:
    """Display configuration and table summary."""
    from services.chatbot import Chatbot

    chatbot = Chatbot.from_config(config)

    print("\n" + "=" * 50)
    print(f"{config.app_name} - Status")
    print("=" * 50 + "\n")

    print("Lexicon")
    print("-" * 30)
    for name, count in chatbot.lexicon.summary().items():
        print(f"  {name.replace('_', ' ').title()}: {count}")

    print("\nResponses")
    print("-" * 30)
    for category in chatbot.selector.responses.categories:
        print(f"  {category}: {len(chatbot.selector.responses.get(category))} replies")

    print("\nRules")
    print("-" * 30)
    for rule in chatbot.selector.classifier.rules:
        print(f"  [{rule.priority:>3}] {rule.name} -> {rule.category.value}")

    print("\nDialogue")
    print("-" * 30)
    print(f"  History Size: {config.dialogue.history_size}")
    print(f"  Positive Threshold: {config.dialogue.positive_threshold}")
    print(f"  Negative Threshold: {config.dialogue.negative_threshold}")
    print(f"  Seed: {config.dialogue.seed if config.dialogue.seed is not None else 'random'}")

    print("\n" + "=" * 50 + "\n")


def run_test_message(config: Config, message: str) -> None:
    """Process a single message and show how it was handled."""
    from services.chatbot import Chatbot

    chatbot = Chatbot.from_config(config)

    print(f"\nTest Message: {message}")
    print("-" * 50)

    result = chatbot.respond(message)

    print(f"  Tokens: {result.tokens}")
    print(f"  Sentiment: {result.sentiment:+.3f}")
    print(f"  Category: {result.category}")
    if result.matched_keyword:
        print(f"  Keyword: {result.matched_keyword}")
    print(f"  Response: {result.response}")
    print(f"  Latency: {result.latency_ms}ms")


def run_console_chat(config: Config) -> int:
    """Run the stdin/stdout chat loop."""
    from services.chatbot import Chatbot
    from ui.console import run_console, build_banner

    chatbot = Chatbot.from_config(config)
    banner = build_banner(config.app_name, config.ui.quit_command) if config.ui.show_banner else None

    return run_console(
        chatbot,
        bot_label=config.ui.bot_label,
        user_prompt=config.ui.user_prompt,
        quit_command=config.ui.quit_command,
        banner=banner,
    )


def run_terminal_ui(config: Config) -> None:
    """Run the terminal UI."""
    try:
        from ui.terminal.app import run_tui
    except ImportError as e:
        raise UIError("Terminal UI is unavailable, install textual", {"error": str(e)})

    run_tui(config=config)


def write_default_config(path: str) -> None:
    """Write a default configuration file."""
    written = save_config(Config(), path)
    print(f"✓ Default configuration written to {written}")


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        if args.init_config:
            write_default_config(args.init_config)
            return 0

        config = load_config(args.config)

        # Apply command-line overrides
        if args.seed is not None:
            config.dialogue.seed = args.seed
        if args.history_size is not None:
            config.dialogue.history_size = args.history_size
        if args.debug:
            config.debug = True
        config.validate()

        setup_logging(
            log_dir=config.log_dir or None,
            log_level="DEBUG" if config.debug else config.log_level,
            json_format=config.json_logs,
            console_output=config.debug,
        )

        if args.tui:
            run_terminal_ui(config)
        elif args.test is not None:
            run_test_message(config, args.test)
        elif args.status:
            run_status_check(config)
        else:
            return run_console_chat(config)

        return 0

    except ChatbotError as e:
        print(f"\nError: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 0


if __name__ == "__main__":
    sys.exit(main())
