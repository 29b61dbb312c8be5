"""Core logic for kyopro: configuration, subprocess helpers and contest layout."""
