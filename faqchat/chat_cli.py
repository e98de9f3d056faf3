"""Interactive terminal chat with the FAQ chat API."""

import argparse
from typing import Optional

from faqchat.conf.config import Config
from faqchat.src.client import ChatSession
from faqchat.src.data_classes import ChatMessage

EXIT_COMMANDS = {"exit", "quit"}


def format_message(message: ChatMessage) -> str:
    prefix = "You" if message.is_user else "Bot"
    return f"{prefix}: {message.text}"


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Chat with the FAQ support bot")
    parser.add_argument(
        "--url",
        type=str,
        default=Config.CHAT_API_URL,
        help=f"Chat endpoint URL (default: {Config.CHAT_API_URL})",
    )
    args = parser.parse_args(argv)

    session = ChatSession(api_url=args.url)
    for message in session.messages:
        print(format_message(message))

    while True:
        try:
            text = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if text.strip().lower() in EXIT_COMMANDS:
            break
        if not text.strip():
            continue

        print("Thinking...")
        reply = session.send(text)
        if reply is not None:
            print(format_message(reply))


if __name__ == "__main__":
    main()
