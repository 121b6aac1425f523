"""Infrastructure layer - concrete aircraft, payment methods, factories and wiring."""
