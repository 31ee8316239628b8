"""Placebook: local storage of favourite places with map previews."""
