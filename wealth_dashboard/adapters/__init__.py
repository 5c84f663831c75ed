"""Adapters exposing the dashboard through a UI and CLIs."""
