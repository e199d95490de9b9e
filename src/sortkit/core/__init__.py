"""Configuration and runtime setup for sortkit."""
