"""wikihubot — relays wiki lifecycle events to a Hubot incoming webhook."""

__version__ = "0.2.0"
