import sys

try:
    from src.wearpair.cli import main
except ImportError as e:
    print("Error: Could not import the WearPair command line entry point.")
    print("Please ensure the project structure is correct (e.g., src/wearpair/cli.py exists).")
    print(f"Details: {e}")
    sys.exit(1)


if __name__ == '__main__':
    sys.exit(main())
