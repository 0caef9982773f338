"""Command-line entry point for the Intercom client."""

import argparse
from pathlib import Path

from dotenv import load_dotenv

from intercom_api import Client, IntercomError
from intercom_api.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    """Print workspace segments, or one conversation with --conversation."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging(to_file=False)

    parser = argparse.ArgumentParser(description="Query the Intercom REST API")
    parser.add_argument("--conversation", help="Conversation id to show")
    args = parser.parse_args()

    try:
        with Client() as client:
            if args.conversation:
                conversation = client.conversations.find(args.conversation)
                print(conversation.model_dump_json(indent=2, exclude_none=True))
            else:
                for segment in client.segments.list().segments:
                    print(segment)
    except IntercomError as e:
        logger.error("Intercom request failed: %s", e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
