"""Record storage backends."""
