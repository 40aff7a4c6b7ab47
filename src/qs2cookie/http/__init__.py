"""HTTP building blocks: raw query parsing, cookie serialization, headers."""
