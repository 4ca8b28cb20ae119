"""Adapters bridging the core matchers to third-party tooling."""
