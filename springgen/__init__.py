"""springgen: scaffold Spring Boot backends from entity descriptions."""

__version__ = "0.1.0"
