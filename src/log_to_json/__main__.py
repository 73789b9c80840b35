"""Module entrypoint.

Allows:
    python -m log_to_json
"""

from __future__ import annotations

from log_to_json.cli import main

if __name__ == "__main__":
    main()
