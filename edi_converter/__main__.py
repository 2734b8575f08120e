"""Package entry point for ``python -m edi_converter``.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
HTTP API with uvicorn. Otherwise, delegates to the CLI's main() function.
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from edi_converter.server.app import run_api
        run_api()
    else:
        from edi_converter.cli import main
        main()
