"""
Main entry point for the postchunks package.

Enables: python -m postchunks [command] [args]
"""

import sys

from postchunks.logging_config import get_logger, setup_logging


logger = get_logger(__name__)


def main():
    """Main entry point that delegates to appropriate CLI modules."""
    setup_logging(log_level="INFO")

    if len(sys.argv) < 2:
        print_help()
        return

    command = sys.argv[1]

    # Remove the command from argv so submodules see the right arguments
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if command == "chunk":
        from postchunks.cli.chunk import main as chunk_main

        chunk_main()
    elif command == "render":
        from postchunks.cli.render import main as render_main

        render_main()
    elif command == "help" or command == "-h" or command == "--help":
        print_help()
    else:
        logger.error(f"Unknown command: {command}")
        print_help()
        sys.exit(1)


def print_help():
    """Print main help message."""
    print("postchunks - split content into chunks at separator markers")
    print()
    print("Usage:")
    print("  python -m postchunks <command> [options]")
    print()
    print("Available commands:")
    print("  chunk    Split documents and save a JSON report of their chunks")
    print("  render   Print the chunks of one document")
    print("  help     Show this help message")
    print()
    print("Examples:")
    print("  python -m postchunks chunk posts/ --output outputs/chunks/posts.json")
    print("  python -m postchunks render post.html --chunk 2")
    print()
    print("For command-specific help:")
    print("  python -m postchunks chunk --help")
    print("  python -m postchunks render --help")


if __name__ == "__main__":
    main()
