"""Load, compile, run and track Rust exercises, with worked solutions in ``lessons``."""

__version__ = "5.6.1"