from dataclasses import dataclass
import logging
import os
import sys

from flask import Flask
from werkzeug.serving import make_server as _make_wsgi_server

logging.basicConfig(stream=sys.stdout, level=logging.INFO)

DEFAULT_COLOR = "Blue"
APP_VERSION = "1.0.0"
PORT = 3000
HOST = "0.0.0.0"


@dataclass(frozen=True)
class Config:
    color: str = DEFAULT_COLOR
    version: str = APP_VERSION
    port: int = PORT
    host: str = HOST

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            environ = os.environ
        # empty APP_COLOR counts as unset
        return cls(color=environ.get("APP_COLOR") or DEFAULT_COLOR)


def greeting(config):
    return f"Hello from the {config.color} environment! Version: {config.version}"


def startup_message(config):
    return f"App listening on port {config.port} - {config.color} (v{config.version})"


def create_app(config=None):
    if config is None:
        config = Config.from_env()

    app = Flask(__name__)
    app.config["APP_CONFIG"] = config

    @app.get("/")
    def home():
        return greeting(app.config["APP_CONFIG"]), 200, {"Content-Type": "text/plain; charset=utf-8"}

    return app


def make_server(app, config):
    """Bind the listening socket.

    Werkzeug reports a port that is already in use on stderr and exits
    with status 1.
    """
    return _make_wsgi_server(config.host, config.port, app, threaded=True)


def main():
    config = Config.from_env()
    app = create_app(config)

    server = make_server(app, config)
    print(startup_message(config), flush=True)
    server.serve_forever()
    return 0


if __name__ == "__main__":
    sys.exit(main())
