"""Core domain: messages, predicates and field matchers."""
