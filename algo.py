"""Entry point: ``python algo.py [--n 8] [--strategy best_first] [--benchmark]``."""

from queensearch.analysis.cli import main


if __name__ == "__main__":
    main()
