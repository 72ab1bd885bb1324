"""Redirects — a short-link service from a mapping plus a YAML file.

Demonstrates composing handlers: the YAML redirects fall back to the
in-memory ones, which fall back to a plain-text default page.

Run:
    python app.py
"""

from pathlib import Path

from urlshort import App, file_handler, map_handler
from urlshort.fallbacks import text

HERE = Path(__file__).parent

default = text("Hello, world!")

path_handler = map_handler(
    {
        "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
        "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
    },
    default,
)

app = App(file_handler(HERE / "redirects.yaml", path_handler))


if __name__ == "__main__":
    app.run()
