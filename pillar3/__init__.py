"""Swiss 3rd pillar (3a/3b) retirement savings simulator."""

__version__ = "0.1.0"
