"""Run configuration introspection as ``python -m gemini_flows.config``.

Examples:
    python -m gemini_flows.config --json
    python -m gemini_flows.config --env-file .env --check
"""

import sys

from .introspection import main

if __name__ == "__main__":
    main(sys.argv[1:])
