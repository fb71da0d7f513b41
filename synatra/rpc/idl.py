"""Loading the Synatra program IDL bundled with the SDK."""

import os

from anchorpy import Idl


def load_program_idl() -> Idl:
    """Load the Synatra IDL from the package's idls directory."""
    # Get the directory where this file is located
    current_dir = os.path.dirname(os.path.abspath(__file__))
    idl_path = os.path.join(current_dir, "idls", "synatra.json")

    with open(idl_path, encoding="utf-8") as f:
        return Idl.from_json(f.read())
