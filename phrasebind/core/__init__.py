"""Core building blocks: store, polyglot slice, translators and bindings."""
