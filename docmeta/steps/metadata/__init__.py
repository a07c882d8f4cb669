"""Document-type detection and typed metadata extraction."""
