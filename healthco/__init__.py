"""Patient records with diagnosis-based vitals alerts and hospital/GP notifications."""

__version__ = "0.1.0"