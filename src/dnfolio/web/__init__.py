"""HTTP surface — read-only JSON API over the post services."""
