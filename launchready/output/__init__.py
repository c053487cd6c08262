"""Report renderers: rich terminal text and JSON."""
