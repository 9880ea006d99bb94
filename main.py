# Same as `python -m elevenlabs_client` or the `elevenlabs-client` script.

if __name__ == "__main__":
    import sys

    from elevenlabs_client.cli import main

    sys.exit(main())
