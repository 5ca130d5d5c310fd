"""Allow running the analyzer with ``python -m portfolio_analyzer``."""

from .main import run

if __name__ == '__main__':
    run()
