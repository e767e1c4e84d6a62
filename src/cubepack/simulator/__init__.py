"""Independent checks of finished packings."""
