"""Package entry point for ``python -m caption_timeline``.

HOW: ``--serve`` starts the HTTP API; anything else goes to the CLI.
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from caption_timeline.server.app import run_api
        run_api()
    else:
        from caption_timeline.cli import main
        main()
