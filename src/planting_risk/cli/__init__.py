"""CLI package for the Rainy Day planting service.

Execute via:
  python -m planting_risk.cli <command> [options]

Or, once installed, simply:
  planting-risk <command>

Commands implemented in `main.py` using the standard library `argparse`.
"""

from .main import main  # re-export for python -m planting_risk.cli

__all__ = ["main"]
