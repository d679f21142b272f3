"""Developer tools for ninewire."""
