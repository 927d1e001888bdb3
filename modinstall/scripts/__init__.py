"""Bundled helper scripts.

``get-pip.py`` is expected in this directory when pip has to be
bootstrapped without ``ensurepip``. It is not shipped with the package;
hosts drop the upstream script here.
"""

from pathlib import Path

SCRIPTS_DIR = Path(__file__).resolve().parent

GET_PIP_SCRIPT = SCRIPTS_DIR / "get-pip.py"
