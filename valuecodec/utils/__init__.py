"""Configuration dataclasses for valuecodec."""
