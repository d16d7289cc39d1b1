"""Project root entry point for launching the HTTP bridge."""

from __future__ import annotations

import os


def main():
    from translate_selected.web import create_app

    app = create_app()
    port = int(os.environ.get("TRANSLATE_SELECTED_PORT", "5501"))
    app.run(host="127.0.0.1", port=port, debug=False)


if __name__ == "__main__":
    main()
