"""Configuration and user-facing messages for az-boards-md."""
