# config.py
import argparse
import configparser
import os
from dataclasses import dataclass, replace
from typing import Optional

from protocol import DEFAULT_PORT

DEFAULT_CONFIG_FILE = "server.ini"


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    # Static client assets; the HTTP responder only starts when this is set
    static_dir: Optional[str] = None
    http_port: int = 8000
    # Log once when the block edit store gets this big (it is never pruned)
    world_warn_size: Optional[int] = 100_000
    # Log every position update
    verbose: bool = False


def load_config(filename=DEFAULT_CONFIG_FILE) -> ServerConfig:
    """Read the [server] section of an INI file; a missing file gives defaults."""
    config = ServerConfig()
    if not filename or not os.path.exists(filename):
        return config

    parser = configparser.ConfigParser()
    parser.read(filename)
    if "server" not in parser:
        print(f"[CONFIG] {filename} has no [server] section, using defaults")
        return config

    section = parser["server"]
    warn_size = section.getint("world_warn_size", fallback=config.world_warn_size)
    return replace(
        config,
        host=section.get("host", fallback=config.host),
        port=section.getint("port", fallback=config.port),
        static_dir=section.get("static_dir", fallback=config.static_dir) or None,
        http_port=section.getint("http_port", fallback=config.http_port),
        world_warn_size=warn_size if warn_size and warn_size > 0 else None,
        verbose=section.getboolean("verbose", fallback=config.verbose),
    )


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Block world multiplayer sync server")
    ap.add_argument("--config", default=DEFAULT_CONFIG_FILE, help="INI file with a [server] section")
    ap.add_argument("--host", help="interface to listen on")
    ap.add_argument("--port", type=int, help=f"WebSocket port (default {DEFAULT_PORT})")
    ap.add_argument("--static-dir", help="serve client files from this directory")
    ap.add_argument("--http-port", type=int, help="port for the static file server")
    ap.add_argument("--verbose", action="store_true", default=None, help="log every position update")
    return ap


def config_from_args(argv=None) -> ServerConfig:
    args = build_arg_parser().parse_args(argv)
    config = load_config(args.config)
    overrides = {
        "host": args.host,
        "port": args.port,
        "static_dir": args.static_dir,
        "http_port": args.http_port,
        "verbose": args.verbose,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})
