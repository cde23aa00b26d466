from __future__ import annotations

from knhello import create_slack_app
from knhello.app import serve

app = create_slack_app()

if __name__ == "__main__":
    serve(app)
