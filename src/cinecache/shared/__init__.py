"""Shared building blocks used across CineCache layers."""
