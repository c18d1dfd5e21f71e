"""
Console Loop - Line-oriented chat over stdin/stdout
===================================================

Reads one line per turn, hands it to the chatbot verbatim and prints the
reply behind a fixed label. The loop ends when a line is exactly the quit
command or the input stream is exhausted.
"""

import sys
from typing import Optional, TextIO

from core.logging import get_logger
from services.chatbot import Chatbot

logger = get_logger("ui.console")


def read_line(stream: TextIO) -> Optional[str]:
    """
    Read one line without its terminator.

    Returns:
        The line, or None at end of input
    """
    line = stream.readline()
    if line == "":
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line


def run_console(
    chatbot: Chatbot,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
    bot_label: str = "Bot: ",
    user_prompt: str = "You: ",
    quit_command: str = "quit",
    banner: Optional[str] = None
) -> int:
    """
    Run the interactive loop until quit or end of input.

    The quit check is an exact, case-sensitive comparison; " quit" or
    "QUIT" are ordinary messages.

    Args:
        chatbot: Chatbot that answers each line
        input_stream: Source of lines (stdin by default)
        output_stream: Destination for prompts and replies (stdout by default)
        bot_label: Prefix for every reply
        user_prompt: Prompt written before each read
        quit_command: Line that ends the session
        banner: Optional text printed once at startup

    Returns:
        Process exit code (0)
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout

    if banner:
        output_stream.write(banner + "\n")

    turns = 0
    while True:
        if user_prompt:
            output_stream.write(user_prompt)
            output_stream.flush()

        line = read_line(input_stream)
        if line is None:
            logger.info("End of input")
            if user_prompt:
                output_stream.write("\n")
            break
        if line == quit_command:
            logger.info("Quit command received")
            break

        response = chatbot.process_input(line)
        output_stream.write(f"{bot_label}{response}\n")
        output_stream.flush()
        turns += 1

    logger.info(f"Console session ended after {turns} turns")
    return 0


def build_banner(app_name: str, quit_command: str) -> str:
    return "\n".join([
        "=" * 50,
        f"{app_name} - type '{quit_command}' to exit",
        "=" * 50,
    ])
