"""Cross-cutting infrastructure shared by every layer."""
