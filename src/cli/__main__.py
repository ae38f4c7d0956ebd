"""`python -m cli` (con `src/` en PYTHONPATH o tras `pip install -e .`)."""

from cli.main import run

run()
