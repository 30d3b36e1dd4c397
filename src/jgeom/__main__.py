import sys

from jgeom.cli import run

sys.exit(run())
