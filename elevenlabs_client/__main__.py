import sys

from elevenlabs_client.cli import main


if __name__ == "__main__":
    sys.exit(main())
