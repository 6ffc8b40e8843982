"""Package entry point for ``python -m suno_lrc``.

RULES:
- ``--serve`` starts the HTTP API with uvicorn
- Anything else falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from suno_lrc.server.app import run_api
        run_api()
    else:
        from suno_lrc.cli import main
        main()
