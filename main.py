"""propdiff - Entry Point.

Usage:
    python main.py collect --legacy libs/legacy --modern libs/modern
    python main.py groups libs/legacy
"""

from propdiff.cli import create_app

app = create_app()


if __name__ == "__main__":
    app()
