"""TalentGate - access decisions for the talent marketplace."""

__version__ = "0.1.0"
