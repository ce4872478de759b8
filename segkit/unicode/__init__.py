"""Code-point decoding and break property tables."""
