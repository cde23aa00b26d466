from __future__ import annotations

from knhello import create_app
from knhello.app import serve

app = create_app()

if __name__ == "__main__":
    serve(app)
